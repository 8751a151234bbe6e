# Global configuration for the sharerecon reconstruction tools
import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Network settings
    SERVER_HOST = os.environ.get("SHARERECON_HOST", "localhost")
    SERVER_PORT = int(os.environ.get("SHARERECON_PORT", 5000))
    REQUEST_TIMEOUT = 5

    # Reconstruction policy
    STRICT_DECODING = _env_flag("SHARERECON_STRICT")  # reject noise characters in share values
    CROSS_CHECK_SHARES = _env_flag("SHARERECON_CROSS_CHECK")  # verify shares beyond the first k

    # Paths
    DATA_DIR = os.environ.get("SHARERECON_DATA_DIR", "data")
    TRACKER_STORAGE = os.path.join(DATA_DIR, "reconstruction_logs.json")

    # Benchmark parameters
    PERFORMANCE_SAMPLES = 100

    @classmethod
    def server_url(cls):
        return f"http://{cls.SERVER_HOST}:{cls.SERVER_PORT}"

    @classmethod
    def ensure_data_dir(cls):
        if not os.path.exists(cls.DATA_DIR):
            os.makedirs(cls.DATA_DIR)
        return cls.DATA_DIR
