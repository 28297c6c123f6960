import os
import time
from typing import Callable

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .utils import logger


class Watcher:
    """Call `callback(path)` whenever the watched source file changes."""

    def __init__(self, path: str, callback: Callable[[str], None]):
        self.observer = Observer()
        self.path = os.path.abspath(path)
        self.callback = callback

    def run(self):
        event_handler = Handler(self.path, self.callback)
        self.observer.schedule(event_handler, os.path.dirname(self.path), recursive=False)
        self.observer.start()
        logger.info("watching %s", self.path)
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.observer.stop()
            self.observer.join()
            raise
        self.observer.join()


class Handler(FileSystemEventHandler):
    def __init__(self, path: str, callback: Callable[[str], None]):
        self.path = os.path.abspath(path)
        self.callback = callback

    def _matches(self, event) -> bool:
        if event.is_directory:
            return False
        return os.path.abspath(os.fsdecode(event.src_path)) == self.path

    def on_modified(self, event):
        if self._matches(event):
            self.callback(self.path)

    def on_created(self, event):
        if self._matches(event):
            self.callback(self.path)

    def on_moved(self, event):
        # editors that save through a temporary file and rename it over the source
        if os.path.abspath(os.fsdecode(event.dest_path)) == self.path:
            self.callback(self.path)
