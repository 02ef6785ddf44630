''' Per module loggers, set up from the module config. '''
import logging
import sys
from logging import handlers
from typing import Optional

from appdoc.conf import default_config, getConfig

DEFAULT_SYSLOG_PORT = 514


def getLoggerHandler(logspec: Optional[str] = None):
    if not logspec or logspec == "stderr":
        return logging.StreamHandler(sys.stderr)

    if logspec == "stdout":
        return logging.StreamHandler(sys.stdout)

    scheme, sep, target = logspec.partition("://")
    if sep and scheme == "file":
        return logging.FileHandler(target)

    if sep and scheme == "syslog":
        host, _, port = target.partition(":")
        return handlers.SysLogHandler(
            address=(host or "localhost", int(port) if port else DEFAULT_SYSLOG_PORT),
            facility=handlers.SysLogHandler.LOG_LOCAL0,
        )

    raise ValueError("Cannot parse logging spec: %s" % logspec)


def _setting(log_config, name, default=None):
    return getattr(log_config, name, default)


def configure(module_logger, log_config):
    ''' Apply level, outputs and format of `log_config`. Returns the new handlers. '''
    level_name = str(_setting(log_config, "LOG_LEVEL", "notset")).upper()
    level = logging.getLevelName(level_name)
    module_logger.setLevel(level if isinstance(level, int) else logging.NOTSET)

    log_format = _setting(log_config, "LOG_FORMATTER")
    formatter = logging.Formatter(log_format, _setting(log_config, "LOG_DATEFMT"))

    outputs = _setting(log_config, "LOG_OUTPUT") or ""
    log_handlers = [getLoggerHandler(spec.strip()) for spec in outputs.split(",") if spec.strip()]
    for handler in log_handlers:
        handler.setFormatter(formatter)

    if _setting(log_config, "LOG_COLORED", False):
        import coloredlogs
        coloredlogs.install(fmt=log_format, level=module_logger.level, logger=module_logger)

    return log_handlers


def __closure__():
    APPDOC_LOGGERS = dict()

    def getLogger(module_name, log_config=None):
        if module_name in APPDOC_LOGGERS:
            return APPDOC_LOGGERS[module_name]

        module_logger = logging.getLogger(module_name)
        for handler in configure(module_logger, log_config or getConfig(module_name)):
            module_logger.addHandler(handler)

        APPDOC_LOGGERS[module_name] = module_logger
        return module_logger

    root_logger = logging.getLogger()
    logging.basicConfig(handlers=configure(root_logger, default_config) or None)
    return getLogger, root_logger


getLogger, default_logger = __closure__()
