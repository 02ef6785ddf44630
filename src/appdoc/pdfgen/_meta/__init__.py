from appdoc import setupModule

from . import defaults

config, logger = setupModule("appdoc.pdfgen", defaults)
