from appdoc import config, logger


DEBUG_APP_EXCEPTION = config.DEBUG_APP_EXCEPTION


class AppDocException(Exception):
    """Base error. `errcode` pins the failure site, `status_code` its HTTP class."""

    status_code = 500
    label = "Internal Error"
    errcode = "D00.000"

    def __init__(self, errcode, message, details=None):
        super().__init__(message)
        self.errcode = errcode
        self.message = message
        self.details = details

        if DEBUG_APP_EXCEPTION:
            logger.error("%s: %s", type(self).__name__, self)

    def __str__(self):
        text = f"{self.errcode} [{self.status_code}] >> {self.message}"
        return text if self.details is None else f"{text} >> {self.details}"

    @property
    def content(self):
        content = {"errcode": self.errcode, "message": self.message}
        if self.details:
            content["details"] = self.details

        return content


class BadRequestError(AppDocException):
    label = "Bad Request"
    status_code = 400
    errcode = "D00.400"


class NotFoundError(AppDocException):
    label = "Not Found"
    status_code = 404
    errcode = "D00.404"


class InternalServerError(AppDocException):
    label = "Internal Server Error"
    status_code = 500
    errcode = "D00.500"


class ApplicationNotFoundError(NotFoundError):
    pass


class TemplateNotFoundError(NotFoundError):
    pass


class ConfigurationError(InternalServerError):
    pass


class RenderError(InternalServerError):
    pass


class ConversionError(InternalServerError):
    pass
