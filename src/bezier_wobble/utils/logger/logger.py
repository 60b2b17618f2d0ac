import threading
from datetime import datetime
from enum import Enum
from .local_file_strategy import LocalFileStrategy


class Logger:
    """
    Static logger shared by the whole application.

    Nothing is stored until a storage strategy is set, either directly or
    through initialize(); until then log() is a no-op.
    """

    class LogPriority(Enum):
        DEBUG = 1
        INFO = 2
        WARNING = 3
        ERROR = 4
        CRITICAL = 5
        DEFAULT = 6

    DEFAULT_LOG_PATH = "logs/bezier_wobble.log"

    is_logging_enabled = True
    log_storage_strategy = None
    _log_lock = threading.Lock()
    _strategy_lock = threading.Lock()
    _initialize_lock = threading.Lock()
    _flush_lock = threading.Lock()

    # INITIALIZE LOGGER
    @classmethod
    def initialize(cls, file_location=None):
        """
        Installs a LocalFileStrategy if no strategy is set yet.

        Parameters:
        file_location (str): Log file path (defaults to DEFAULT_LOG_PATH).
        """
        with cls._initialize_lock:
            if cls.log_storage_strategy is None:
                file_location = file_location or cls.DEFAULT_LOG_PATH
                cls.set_log_storage_strategy(LocalFileStrategy(file_location))

                cls.log(f"Logger initialized with file storage at {file_location}.", cls.LogPriority.INFO)

    # LOG WITH MESSAGE AND PRIORITY
    @classmethod
    def log(cls, message, priority=LogPriority.DEBUG):
        """
        Stores a message through the current storage strategy.

        Parameters:
        message (str): The log message.
        priority (LogPriority): The priority level (default DEBUG).
        """
        with cls._log_lock:
            if cls.is_logging_enabled and cls.log_storage_strategy:
                cls.log_storage_strategy.store_log(
                    message, priority.name, datetime.now().strftime("%Y-%m-%d %H:%M:%S")
                )

    # SET LOG STORAGE STRATEGY
    @classmethod
    def set_log_storage_strategy(cls, log_storage_strategy):
        with cls._strategy_lock:
            cls.log_storage_strategy = log_storage_strategy

    # FLUSH LOGS
    @classmethod
    def flush_logs(cls):
        with cls._flush_lock:
            if cls.is_logging_enabled and cls.log_storage_strategy:
                cls.log_storage_strategy.flush_logs()

    # DISABLE LOGGING
    @classmethod
    def disable_logging(cls):
        cls.log("Logging disabled", cls.LogPriority.INFO)
        cls.is_logging_enabled = False

    # ENABLE LOGGING
    @classmethod
    def enable_logging(cls):
        cls.is_logging_enabled = True
        cls.log("Logging enabled", cls.LogPriority.INFO)
