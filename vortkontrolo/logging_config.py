import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    A logger that shows progress information in both console and log file.
    Used while checking long files, line by line.
    """
    def __init__(self, total, desc="Progress", logger=None):
        self.total = total
        self.current = 0
        self.desc = desc
        self.logger = logger or logging.getLogger()
        self.start_time = datetime.now()
        self.last_log_percent = -1

    def update(self, n=1, item_desc=None):
        """Update progress by n items."""
        self.current += n
        percent = int((self.current / self.total) * 100) if self.total > 0 else 0

        # Log every 10% or when description changes
        if percent - self.last_log_percent >= 10 or item_desc or self.current == self.total:
            elapsed = (datetime.now() - self.start_time).total_seconds()
            rate = self.current / elapsed if elapsed > 0 else 0
            eta_seconds = (self.total - self.current) / rate if rate > 0 else 0

            msg_parts = [f"{self.desc}: {self.current}/{self.total} ({percent}%)"]
            if item_desc:
                msg_parts.append(f"- {item_desc}")
            if eta_seconds > 0 and self.current < self.total:
                msg_parts.append(f"[ETA: {int(eta_seconds)}s]")

            self.logger.info(" ".join(msg_parts))
            self.last_log_percent = percent

    def close(self):
        """Mark progress as complete."""
        if self.current < self.total:
            self.current = self.total
            self.update(0)


def setup_logging(log_file=None, level=logging.WARNING, debug=False):
    """
    Set up logging for the command-line tool.

    Args:
        log_file: Optional path to a log file. Without one, logs go to stderr only.
        level: Logging level (default: WARNING, so results on stdout stay clean).
        debug: If True, enables DEBUG level with file and line context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    if debug:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = []
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        handlers.append(file_handler)

    # Results go to stdout, so the console log goes to stderr.
    console_handler = logging.StreamHandler(sys.stderr)
    handlers.append(console_handler)

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)

    # Add run separator
    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("DEBUG MODE ENABLED - Verbose logging active")
    logging.info("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
        logger: Logger to use (default: the root logger)
    """
    logger = logger or logging.getLogger()
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
