"""Jinja2 environment shared by the page routes and the error pages."""
from fastapi.templating import Jinja2Templates

from .config import TEMPLATES_DIR, ROOT_PATH
from .forms import format_form_datetime

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals["base_url"] = ROOT_PATH
templates.env.filters["form_datetime"] = format_form_datetime
