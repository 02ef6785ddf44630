from appdoc.error import TemplateNotFoundError

PENDING_APPLICATION = "PendingApplication"
ACTIVATED_APPLICATION = "ActivatedApplication"
IN_REVIEW_APPLICATION = "InReviewApplication"


class TemplatePathProvider(object):
    """Resolve a template key to the path appended to the document base uri."""

    def __init__(self, mapping):
        self._mapping = dict(mapping)

    @classmethod
    def from_config(cls, config):
        return cls(config.TEMPLATE_PATHS)

    def get(self, key):
        try:
            return self._mapping[key]
        except KeyError:
            raise TemplateNotFoundError("D02.404", f"No template registered for key [{key}]")
