import enum

from pyrsistent import PRecord, field


class PageNumbers(enum.Enum):
    NONE = "NONE"
    NUMERIC = "NUMERIC"


class HeaderRepeat(enum.Enum):
    ALL_PAGES = "ALL_PAGES"
    FIRST_PAGE_ONLY = "FIRST_PAGE_ONLY"


class HeaderOptions(PRecord):
    header_repeat = field(type=HeaderRepeat, initial=HeaderRepeat.ALL_PAGES, factory=HeaderRepeat)
    header_html = field(type=str, mandatory=True)


class PdfOptions(PRecord):
    page_numbers = field(type=PageNumbers, initial=PageNumbers.NONE, factory=PageNumbers)
    header = field(type=(HeaderOptions, type(None)), initial=None)
