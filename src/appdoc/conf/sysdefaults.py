''' Last-resort values, shared by every module config. '''

LOG_LEVEL = "info"
LOG_FORMATTER = "[%(asctime)s] %(levelname)-7s [%(name)s:%(lineno)d] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
# Comma separated: stderr, stdout, file://<path>, syslog://<host>[:<port>]
LOG_OUTPUT = None
LOG_COLORED = False
