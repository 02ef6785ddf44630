import os
import traceback

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

import jinja2

from dateutil import parser
from markupsafe import escape

from appdoc import config as app_config
from appdoc.error import RenderError
from ._meta import config, logger

# blank string so that missing values never print as 'None'
DEFAULT_VALUE = ""


def default_data(value):
    return DEFAULT_VALUE if value is None else value


def format_date(value):
    if isinstance(value, (datetime, date)):
        return value.strftime("%d %B %Y")
    if not value:
        return DEFAULT_VALUE
    return parser.parse(value).strftime("%d %B %Y")


def format_money(value, places=2):
    if value is None:
        return DEFAULT_VALUE
    quantum = Decimal(1).scaleb(-places)
    amount = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{amount:,}"


def view_data(view):
    if view is None:
        return {}

    # Nested models stay objects so templates can use attribute access
    return dict(view)


class Jinja2TemplateRenderer(object):
    def __init__(self, searchpath=None):
        self._filters = {}
        self._globals = {}
        self._environments = {}
        self._searchpath = searchpath

    def _environment(self, searchpath):
        if searchpath not in self._environments:
            env = jinja2.Environment(
                loader=jinja2.FileSystemLoader(searchpath=searchpath),
                autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
            )
            env.filters.update(self._filters)
            env.globals.update(self._globals)
            self._environments[searchpath] = env

        return self._environments[searchpath]

    def add_filter(self, name, func):
        self._filters[name] = func
        for env in self._environments.values():
            env.filters[name] = func

    def add_global(self, key, value):
        self._globals[key] = value
        for env in self._environments.values():
            env.globals[key] = value

    def render(self, template_id, data: Dict[str, Any], searchpath=None):
        searchpath = searchpath or self._searchpath
        try:
            template = self._environment(searchpath).get_template(template_id)
            return str(template.render(**data))
        except Exception as e:
            if not config.RENDER_ERROR_PAGE:
                raise RenderError(
                    "D03.500", f"Cannot render template [{template_id}]", str(e)
                ) from e

            logger.exception("Cannot render template [%s]", template_id)
            return error_page(os.path.join(searchpath or "", template_id), e)

    def generate_from_path(self, path, view):
        ''' Render the template located at `path` with the fields of `view`. '''
        searchpath, template_id = os.path.split(path)
        logger.debug("Rendering template [%s] from [%s]", template_id, searchpath)
        return self.render(template_id, view_data(view), searchpath=searchpath)


def error_page(template, error):
    stack_trace = escape(traceback.format_exc())
    return f"""
        <html><body>
        <h3>Cannot render document</h3>
        <h4>Template: {escape(template)}</h4>
        <h4>Error: {escape(str(error))}</h4>
        <code><pre style="font-size: 0.8em">{stack_trace}</pre></code>
        </body></html>"""


jinja2renderer = Jinja2TemplateRenderer(app_config.TEMPLATE_DIR)
jinja2renderer.add_filter("default_data", default_data)
jinja2renderer.add_filter("format_date", format_date)
jinja2renderer.add_filter("format_money", format_money)
