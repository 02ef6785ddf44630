import os

DEBUG_APP_EXCEPTION = False

SUPPORT_EMAIL = "support@example.com"
SIGNATURE = "The Client Services Team"

# Applied to (amount - fees) of every fund in the portfolio total.
TAX_RATE = "1.0"

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
TEMPLATE_PATHS = {
    "PendingApplication": "/pending_application.html",
    "ActivatedApplication": "/activated_application.html",
    "InReviewApplication": "/in_review_application.html",
}

PDF_HEADER_HTML = (
    "<!DOCTYPE html><html><head><meta charset=\"utf-8\"></head>"
    "<body style=\"font-family: sans-serif; font-size: 10px; text-align: right\">"
    "Application Summary</body></html>"
)
