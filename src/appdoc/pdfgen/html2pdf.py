import os
import tempfile

import pdfkit

from appdoc.error import ConversionError

from ._meta import config, logger
from .datadef import HeaderRepeat, PageNumbers, PdfOptions

# wkhtmltopdf substitutes page variables into the query string of header pages.
FIRST_PAGE_ONLY_SCRIPT = """<script>
function showOnFirstPage() {
    var vars = {};
    document.location.search.substring(1).split('&').forEach(function (pair) {
        var kv = pair.split('=', 2);
        vars[kv[0]] = decodeURIComponent(kv[1] || '');
    });
    if (vars['page'] !== '1') {
        document.body.style.visibility = 'hidden';
    }
}
</script>"""


def first_page_only(header_html):
    if "<body" not in header_html:
        header_html = f"<!DOCTYPE html><html><head></head><body>{header_html}</body></html>"

    header_html = header_html.replace("<body", "<body onload=\"showOnFirstPage()\"", 1)
    if "</head>" in header_html:
        return header_html.replace("</head>", f"{FIRST_PAGE_ONLY_SCRIPT}</head>", 1)

    return FIRST_PAGE_ONLY_SCRIPT + header_html


class WkHtml2PdfConverter(object):
    """Convert rendered html into pdf bytes with wkhtmltopdf."""

    def __init__(self, wkhtmltopdf=None, **options):
        self._wkhtmltopdf = wkhtmltopdf if wkhtmltopdf is not None else config.WKHTMLTOPDF_PATH
        self.setup_options(options)

    def setup_options(self, opts):
        self._options = {
            "disable-smart-shrinking": "",
            "enable-local-file-access": None,
            "encoding": "UTF-8",
            "footer-font-size": "10",
            "header-font-size": "10",
            "header-spacing": 15,
            "load-error-handling": "ignore",
            "load-media-error-handling": "ignore",
            "margin-bottom": config.PDF_MARGIN,
            "margin-left": config.PDF_MARGIN,
            "margin-right": config.PDF_MARGIN,
            "margin-top": config.PDF_MARGIN,
            "page-size": config.PDF_PAGE_SIZE,
        }
        self._options.update(opts)

    @property
    def options(self):
        return self._options

    def configuration(self):
        if not self._wkhtmltopdf:
            return None

        return pdfkit.configuration(wkhtmltopdf=self._wkhtmltopdf)

    def build_options(self, pdf_options: PdfOptions, header_file=None):
        options = dict(self.options)
        if pdf_options.page_numbers == PageNumbers.NUMERIC:
            options["footer-center"] = "[page]"

        if header_file is not None:
            options["header-html"] = header_file

        return options

    def write_header(self, header, workdir):
        if header is None:
            return None

        html = header.header_html
        if header.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY:
            html = first_page_only(html)

        # wkhtmltopdf only accepts the header as a file or url
        header_file = os.path.join(workdir, "header.html")
        with open(header_file, "w", encoding="utf-8") as fp:
            fp.write(html)

        return header_file

    def generate_from_html(self, html, pdf_options=None):
        pdf_options = pdf_options or PdfOptions()

        with tempfile.TemporaryDirectory(prefix="appdoc-") as workdir:
            header_file = self.write_header(pdf_options.header, workdir)
            options = self.build_options(pdf_options, header_file)

            try:
                pdf = pdfkit.from_string(
                    html, False, options=options, configuration=self.configuration()
                )
            except (IOError, OSError) as e:
                raise ConversionError("D04.500", "Unable to convert html to pdf", str(e)) from e

        if not pdf:
            raise ConversionError("D04.500", "wkhtmltopdf produced an empty document")

        logger.info("Generated pdf document (%d bytes)", len(pdf))
        return pdf
