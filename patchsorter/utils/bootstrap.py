"""
bootstrap.py - One-time fetch of the patch source
Single responsibility: run `git clone` on a worker thread that the UI can
wait on or cancel.
"""
import logging
import os
import shutil
import subprocess
import threading

from patchsorter.exceptions import BootstrapError

logger = logging.getLogger(__name__)


def needs_bootstrap(patches_dir: str) -> bool:
    return not os.path.isdir(patches_dir)


def clone_command(repo_url: str, target_dir: str) -> list[str]:
    return [
        "git",
        "clone",
        "--depth=1",
        "--single-branch",
        repo_url,
        target_dir,
    ]


class BootstrapTask:
    """
    Shallow-clones ``repo_url`` into ``target_dir`` in the background.

    start() returns immediately; wait() blocks until the clone finishes and
    raises BootstrapError if it failed or was cancelled. There is no timeout
    unless the caller passes one to wait().
    """

    def __init__(self, repo_url: str, target_dir: str, popen=subprocess.Popen):
        self.repo_url = repo_url
        self.target_dir = target_dir
        self._popen = popen
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._process = None
        self._thread: threading.Thread | None = None
        self._cancelled = False
        self._error: BootstrapError | None = None
        self._callbacks = []

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def error(self) -> BootstrapError | None:
        return self._error

    def start(self) -> "BootstrapTask":
        if self._thread is not None:
            raise RuntimeError("Bootstrap task already started")
        # A partial checkout from an interrupted run would make git refuse
        if os.path.exists(self.target_dir):
            logger.info("Removing stale checkout at %s", self.target_dir)
            shutil.rmtree(self.target_dir, ignore_errors=True)
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def _run(self) -> None:
        cmd = clone_command(self.repo_url, self.target_dir)
        try:
            with self._lock:
                if self._cancelled:
                    raise BootstrapError("Clone cancelled")
                logger.info("Running: %s", " ".join(cmd))
                self._process = self._popen(cmd)
            returncode = self._process.wait()
            if self._cancelled:
                raise BootstrapError("Clone cancelled")
            if returncode != 0:
                raise BootstrapError(
                    f"git clone of {self.repo_url} failed with exit code {returncode}"
                )
            logger.info("Cloned %s into %s", self.repo_url, self.target_dir)
        except BootstrapError as e:
            self._error = e
        except OSError as e:
            self._error = BootstrapError(f"Could not run git: {e}")
        finally:
            self._done.set()
            self._fire_callbacks()

    def _fire_callbacks(self) -> None:
        with self._lock:
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for callback in callbacks:
            try:
                callback(self)
            except Exception:
                logger.exception("Bootstrap completion callback failed")

    def on_done(self, callback) -> None:
        """Call ``callback(task)`` once the task finishes (worker thread)."""
        with self._lock:
            if not self._done.is_set():
                self._callbacks.append(callback)
                return
        callback(self)

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until the clone finishes. Returns False if ``timeout`` elapsed
        first, True on success; raises BootstrapError on failure.
        """
        if self._thread is None:
            raise RuntimeError("Bootstrap task not started")
        if not self._done.wait(timeout):
            return False
        if self._error is not None:
            raise self._error
        return True

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            process = self._process
        if process is not None and process.poll() is None:
            logger.info("Cancelling clone of %s", self.repo_url)
            process.terminate()
