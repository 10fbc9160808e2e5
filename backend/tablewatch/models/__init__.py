from tablewatch.models.watch_list_entry import WatchListEntry

__all__ = ["WatchListEntry"]
