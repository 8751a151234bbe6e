import time
import json
import os
import threading
import config


class ReconstructionTracker:
    def __init__(self, log_file=None):
        if log_file is None:
            config.Config.ensure_data_dir()
            log_file = config.Config.TRACKER_STORAGE
        self.log_file = log_file
        self.logs = self._load_logs()
        # Flask serves requests from worker threads; mutate-and-save runs under this lock
        self._lock = threading.Lock()

    def _load_logs(self):
        if os.path.exists(self.log_file):
            with open(self.log_file, "r") as f:
                return json.load(f)
        return {}

    def _save_logs(self):
        with open(self.log_file, "w") as f:
            json.dump(self.logs, f, indent=2)

    def _event(self, reconstruction_id, event, **details):
        entry = {"time": time.time(), "event": event}
        entry.update(details)
        self.logs[reconstruction_id]["events"].append(entry)

    def log_start(self, reconstruction_id, required, supplied):
        with self._lock:
            self.logs[reconstruction_id] = {
                "start_time": time.time(),
                "status": "initiated",
                "required": required,
                "supplied": supplied,
                "events": [{"time": time.time(), "event": "reconstruction_started"}]
            }
            self._save_logs()

    def log_success(self, reconstruction_id, commitment):
        with self._lock:
            if reconstruction_id in self.logs:
                log = self.logs[reconstruction_id]
                log["status"] = "success"
                log["end_time"] = time.time()
                log["commitment"] = commitment
                self._event(reconstruction_id, "reconstruction_success")
                self._save_logs()

    def log_failure(self, reconstruction_id, error):
        with self._lock:
            if reconstruction_id not in self.logs:
                # documents that fail to load never reach log_start
                self.logs[reconstruction_id] = {
                    "start_time": time.time(),
                    "status": "initiated",
                    "events": []
                }
            log = self.logs[reconstruction_id]
            log["status"] = "failed"
            log["end_time"] = time.time()
            log["error"] = str(error)
            log["error_type"] = type(error).__name__
            self._event(reconstruction_id, "reconstruction_failed", error=str(error))
            self._save_logs()

    def get_log(self, reconstruction_id):
        with self._lock:
            return self.logs.get(reconstruction_id)

    def count(self):
        with self._lock:
            return len(self.logs)
