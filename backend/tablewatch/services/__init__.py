from tablewatch.services.watch_list_service import SqlWatchListStore, add_to_watch_list, get_watch_list

__all__ = ["SqlWatchListStore", "add_to_watch_list", "get_watch_list"]
