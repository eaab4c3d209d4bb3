"""Tests for the background clone task."""

import threading
from unittest.mock import MagicMock

import pytest

from patchsorter.exceptions import BootstrapError
from patchsorter.utils.bootstrap import BootstrapTask, clone_command, needs_bootstrap


class FakeProcess:
    """Stands in for subprocess.Popen; wait() blocks until release()."""

    def __init__(self, returncode=0, block=False):
        self.returncode = returncode
        self._released = threading.Event()
        if not block:
            self._released.set()
        self.terminated = False

    def wait(self):
        self._released.wait(5)
        return self.returncode

    def poll(self):
        return self.returncode if self._released.is_set() else None

    def terminate(self):
        self.terminated = True
        self.returncode = -15
        self._released.set()

    def release(self):
        self._released.set()


def fake_popen(process):
    popen = MagicMock(return_value=process)
    return popen


class TestNeedsBootstrap:
    def test_missing_dir(self, tmp_path):
        assert needs_bootstrap(str(tmp_path / "paper" / "patches" / "server"))

    def test_existing_dir(self, tmp_path):
        assert not needs_bootstrap(str(tmp_path))


class TestCloneCommand:
    def test_shallow_single_branch(self):
        assert clone_command("https://example.com/repo", "paper") == [
            "git",
            "clone",
            "--depth=1",
            "--single-branch",
            "https://example.com/repo",
            "paper",
        ]


class TestBootstrapTask:
    def test_success(self, tmp_path):
        target = str(tmp_path / "paper")
        popen = fake_popen(FakeProcess(returncode=0))
        task = BootstrapTask("https://example.com/repo", target, popen=popen)
        assert task.start().wait(timeout=5) is True
        assert task.done
        assert task.error is None
        popen.assert_called_once_with(clone_command("https://example.com/repo", target))

    def test_nonzero_exit_raises(self, tmp_path):
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=fake_popen(FakeProcess(128)))
        task.start()
        with pytest.raises(BootstrapError, match="exit code 128"):
            task.wait(timeout=5)

    def test_missing_git_raises(self, tmp_path):
        popen = MagicMock(side_effect=FileNotFoundError("git"))
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=popen)
        task.start()
        with pytest.raises(BootstrapError, match="Could not run git"):
            task.wait(timeout=5)

    def test_wait_times_out_while_running(self, tmp_path):
        process = FakeProcess(block=True)
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=fake_popen(process))
        task.start()
        assert task.wait(timeout=0.05) is False
        assert not task.done
        process.release()
        assert task.wait(timeout=5) is True

    def test_cancel_terminates_process(self, tmp_path):
        process = FakeProcess(block=True)
        popen = fake_popen(process)
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=popen)
        task.start()
        # make sure the worker has launched the process before cancelling
        for _ in range(100):
            if popen.called:
                break
            threading.Event().wait(0.01)
        task.cancel()
        assert process.terminated
        with pytest.raises(BootstrapError, match="cancelled"):
            task.wait(timeout=5)

    def test_cancel_before_start_never_runs_git(self, tmp_path):
        popen = fake_popen(FakeProcess())
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=popen)
        task.cancel()
        task.start()
        with pytest.raises(BootstrapError, match="cancelled"):
            task.wait(timeout=5)
        popen.assert_not_called()

    def test_removes_stale_checkout(self, tmp_path):
        target = tmp_path / "paper"
        (target / "leftover").mkdir(parents=True)
        task = BootstrapTask("url", str(target), popen=fake_popen(FakeProcess()))
        task.start().wait(timeout=5)
        assert not target.exists()

    def test_wait_before_start(self, tmp_path):
        task = BootstrapTask("url", str(tmp_path / "paper"))
        with pytest.raises(RuntimeError):
            task.wait()

    def test_start_twice(self, tmp_path):
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=fake_popen(FakeProcess()))
        task.start()
        with pytest.raises(RuntimeError):
            task.start()
        task.wait(timeout=5)

    def test_on_done_called_once(self, tmp_path):
        process = FakeProcess(block=True)
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=fake_popen(process))
        seen = []
        finished = threading.Event()

        def callback(t):
            seen.append(t)
            finished.set()

        task.on_done(callback)
        task.start()
        process.release()
        assert finished.wait(5)
        task.wait(timeout=5)
        assert seen == [task]

    def test_on_done_after_completion_runs_immediately(self, tmp_path):
        task = BootstrapTask("url", str(tmp_path / "paper"), popen=fake_popen(FakeProcess()))
        task.start().wait(timeout=5)
        seen = []
        task.on_done(seen.append)
        assert seen == [task]
