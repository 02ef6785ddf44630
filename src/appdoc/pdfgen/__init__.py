from ._meta import config, logger  # isort: skip
from .datadef import HeaderOptions, HeaderRepeat, PageNumbers, PdfOptions
from .engine import Jinja2TemplateRenderer, jinja2renderer
from .html2pdf import WkHtml2PdfConverter


def genpdf(template_path, view, pdf_options=None):
    html = jinja2renderer.generate_from_path(template_path, view)
    return WkHtml2PdfConverter().generate_from_html(html, pdf_options)


__all__ = (
    "genpdf",
    "HeaderOptions",
    "HeaderRepeat",
    "Jinja2TemplateRenderer",
    "jinja2renderer",
    "PageNumbers",
    "PdfOptions",
    "WkHtml2PdfConverter",
    "config",
    "logger",
)
