from decimal import Decimal, InvalidOperation
from uuid import UUID

from appdoc import config as default_config, logger as default_logger
from appdoc.error import ApplicationNotFoundError, BadRequestError, ConfigurationError
from appdoc.model import (
    ApplicationState,
    ActivatedApplicationView,
    InReviewApplicationView,
    PendingApplicationView,
)
from appdoc.pdfgen import (
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
    WkHtml2PdfConverter,
    jinja2renderer,
)
from appdoc.template import (
    ACTIVATED_APPLICATION,
    IN_REVIEW_APPLICATION,
    PENDING_APPLICATION,
    TemplatePathProvider,
)

IN_REVIEW_MESSAGE = "Your application has been placed in review"
IN_REVIEW_REASONS = (
    ("address", " pending outstanding address verification for FICA purposes."),
    ("bank", " pending outstanding bank account verification."),
)
IN_REVIEW_FALLBACK = " because of suspicious account behaviour. Please contact support ASAP."


def parse_tax_rate(value):
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation:
        raise ConfigurationError("D06.500", "Invalid TAX_RATE setting", repr(value))

    if not rate.is_finite() or rate < 0:
        raise ConfigurationError("D06.501", "TAX_RATE must be a non-negative number", repr(value))

    return rate


def portfolio_total(funds, tax_rate):
    rate = parse_tax_rate(tax_rate)
    return sum(((fund.amount - fund.fees) * rate for fund in funds), Decimal(0))


def in_review_message(review):
    reason = review.reason if review is not None else None
    for keyword, suffix in IN_REVIEW_REASONS:
        if reason is not None and keyword in reason:
            return IN_REVIEW_MESSAGE + suffix

    return IN_REVIEW_MESSAGE + IN_REVIEW_FALLBACK


def _common_fields(application, config):
    return dict(
        reference_number=application.reference_number,
        state=application.state.description,
        full_name=application.person.full_name,
        applied_on=application.date,
        support_email=config.SUPPORT_EMAIL,
        signature=config.SIGNATURE,
    )


def _portfolio_fields(application, config):
    funds = application.portfolio_funds
    return dict(
        legal_entity=application.legal_entity if application.is_legal_entity else None,
        portfolio_funds=funds,
        portfolio_total_amount=portfolio_total(funds, config.TAX_RATE),
    )


def build_pending_view(application, config):
    return PendingApplicationView(**_common_fields(application, config))


def build_activated_view(application, config):
    return ActivatedApplicationView(
        **_common_fields(application, config),
        **_portfolio_fields(application, config),
    )


def build_in_review_view(application, config):
    return InReviewApplicationView(
        **_common_fields(application, config),
        **_portfolio_fields(application, config),
        in_review_message=in_review_message(application.current_review),
        in_review_information=application.current_review,
    )


VIEW_BUILDERS = {
    ApplicationState.PENDING: (PENDING_APPLICATION, build_pending_view),
    ApplicationState.ACTIVATED: (ACTIVATED_APPLICATION, build_activated_view),
    ApplicationState.IN_REVIEW: (IN_REVIEW_APPLICATION, build_in_review_view),
}


def build_view(application, config=default_config):
    ''' Select the template key and assemble the view model for the application state.

        Returns `(template_key, view)`, or `None` when no document exists for the state.
    '''
    try:
        template_key, builder = VIEW_BUILDERS[application.state]
    except KeyError:
        return None

    return template_key, builder(application, config)


def default_pdf_options(config=default_config):
    return PdfOptions(
        page_numbers=PageNumbers.NUMERIC,
        header=HeaderOptions(
            header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
            header_html=config.PDF_HEADER_HTML,
        ),
    )


def validate_application_id(application_id):
    if application_id is None or (isinstance(application_id, str) and not application_id.strip()):
        raise BadRequestError("D05.400", "Application id is required.")

    if isinstance(application_id, UUID):
        return application_id

    try:
        return UUID(str(application_id).strip())
    except ValueError:
        raise BadRequestError("D05.401", f"Invalid application id: {application_id}")


def validate_base_uri(base_uri):
    if base_uri is None or not str(base_uri).strip():
        raise BadRequestError("D05.402", "Base uri is required.")

    base_uri = str(base_uri)
    return base_uri[:-1] if base_uri.endswith("/") else base_uri


class ApplicationDocumentGenerator(object):
    """Generate the pdf document of an application according to its state."""

    def __init__(
        self,
        store,
        template_path_provider=None,
        view_generator=None,
        config=None,
        pdf_generator=None,
        logger=None,
    ):
        if store is None:
            raise ValueError("An application store is required.")

        self._store = store
        self._config = config or default_config
        parse_tax_rate(self._config.TAX_RATE)
        self._template_path_provider = template_path_provider or TemplatePathProvider.from_config(self._config)
        self._logger = logger or default_logger
        self._view_generator = view_generator or jinja2renderer
        self._pdf_generator = pdf_generator or WkHtml2PdfConverter()

    @property
    def config(self):
        return self._config

    def generate(self, application_id, base_uri):
        application_id = validate_application_id(application_id)
        base_uri = validate_base_uri(base_uri)

        try:
            application = self._store.fetch(application_id)
        except ApplicationNotFoundError:
            self._logger.warning("No application found for id '%s'", application_id)
            return None

        selected = build_view(application, self._config)
        if selected is None:
            self._logger.warning(
                "The application is in state '%s' and no valid document can be generated for it.",
                application.state,
            )
            return None

        template_key, view = selected
        path = self._template_path_provider.get(template_key)
        self._logger.info(
            "Rendering [%s] document for application [%s]", template_key, application.reference_number
        )
        html = self._view_generator.generate_from_path(f"{base_uri}{path}", view)
        pdf = self._pdf_generator.generate_from_html(html, default_pdf_options(self._config))

        self._logger.info(
            "Generated [%s] document for application [%s] (%d bytes)",
            template_key, application.reference_number, len(pdf),
        )
        return pdf
