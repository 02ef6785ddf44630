# Render a diagnostic page instead of raising when a template fails.
RENDER_ERROR_PAGE = False

# Empty means pdfkit looks up wkhtmltopdf on PATH.
WKHTMLTOPDF_PATH = ""
PDF_PAGE_SIZE = "A4"
PDF_MARGIN = "0.9525cm"
