"""Background workers that run workflow jobs off the GUI thread."""

import logging

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from core.utils import DoneCallback, ErrorCallback, Job

logger = logging.getLogger(__name__)


class TaskWorker(QThread):
    """Runs one job and hands its outcome back to the GUI thread.

    The worker object lives in the thread that created it, so the slots
    below run there when the signals are emitted from ``run()``.
    """

    result_ready = pyqtSignal(object)  # job return value
    error = pyqtSignal(object)         # exception raised by the job

    def __init__(self, job: Job, on_done: DoneCallback, on_error: ErrorCallback, parent=None):
        super().__init__(parent)
        self._job = job
        self._on_done = on_done
        self._on_error = on_error
        self.result_ready.connect(self._deliver_result)
        self.error.connect(self._deliver_error)

    def run(self):
        try:
            value = self._job()
        except Exception as e:
            self.error.emit(e)
            return
        self.result_ready.emit(value)

    @pyqtSlot(object)
    def _deliver_result(self, value):
        self._on_done(value)

    @pyqtSlot(object)
    def _deliver_error(self, error):
        self._on_error(error)


class TaskLauncher(QObject):
    """Launcher for WorkflowController that starts one TaskWorker per job."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._workers = set()

    def __call__(self, job: Job, on_done: DoneCallback, on_error: ErrorCallback):
        worker = TaskWorker(job, on_done, on_error, parent=self)
        self._workers.add(worker)
        worker.finished.connect(lambda w=worker: self._forget(w))
        worker.start()

    def running_count(self) -> int:
        return sum(1 for w in self._workers if w.isRunning())

    def _forget(self, worker: TaskWorker):
        self._workers.discard(worker)
        worker.deleteLater()

    def cleanup(self, timeout_ms: int = 5000):
        """Wait for running workers before the application exits."""
        for worker in list(self._workers):
            if worker.isRunning() and not worker.wait(timeout_ms):
                logger.warning("Worker still running after %d ms, terminating", timeout_ms)
                worker.terminate()
                worker.wait(2000)
