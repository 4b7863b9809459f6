import logging
import sys
from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname

        log_record['module'] = record.module
        log_record['lineno'] = record.lineno
        log_record['pathname'] = record.pathname


PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _is_service_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_assessment_service", False)


def setup_logging(log_level_str: str = "INFO", json_logs: bool = True) -> None:
    """
    Configures root logging for the service: structured JSON lines on stdout,
    or the plain text format when ``json_logs`` is off.

    Safe to call more than once; the previously installed handler is replaced.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in [h for h in root_logger.handlers if _is_service_handler(h)]:
        root_logger.removeHandler(handler)

    log_handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        log_handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s'))
    else:
        log_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    log_handler._assessment_service = True
    root_logger.addHandler(log_handler)
    root_logger.info(f"Logging configured with level: {logging.getLevelName(log_level)} (json={json_logs})")
