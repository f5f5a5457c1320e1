"""Report generators for calculation results.

Each generator takes a list of Calculations and returns the rendered
text: an aligned table, JSON, or CSV.
"""

from __future__ import annotations

import csv
import io
import json

import jinja2

from eui64calc.models.result import Calculation

_TEXT_TEMPLATE = jinja2.Template("""\
{% for c in calculations -%}
{% if c.name %}{{ c.name.ljust(name_width) }}  {% endif -%}
{{ c.mac.ljust(mac_width) }}  \
{% if c.ok -%}
{{ c.interface_id }}{% if c.full_address %}  {{ c.full_address }}{% endif %}
{% else -%}
ERROR: {{ c.error_message }}
{% endif -%}
{% endfor %}""")

_SINGLE_TEMPLATE = jinja2.Template("""\
Interface ID: {{ c.interface_id }}
{% if c.full_address -%}
Full IPv6:    {{ c.full_address }}
{% endif %}""")

FIELDS = ("name", "mac", "prefix", "interface_id", "full_address", "error", "error_code")


def _as_dict(calc: Calculation) -> dict[str, str]:
    return {
        "name": calc.name,
        "mac": calc.mac,
        "prefix": calc.prefix,
        "interface_id": calc.interface_id,
        "full_address": calc.full_address,
        "error": calc.error_message,
        "error_code": calc.error_code,
    }


def generate_text(calculations: list[Calculation]) -> str:
    """Render calculations as an aligned plain-text table.

    A single successful calculation without a name is rendered as a
    short labelled block instead.
    """
    if len(calculations) == 1 and calculations[0].ok and not calculations[0].name:
        return _SINGLE_TEMPLATE.render(c=calculations[0])

    return _TEXT_TEMPLATE.render(
        calculations=calculations,
        name_width=max((len(c.name) for c in calculations), default=0),
        mac_width=max((len(c.mac) for c in calculations), default=0),
    )


def generate_json(calculations: list[Calculation]) -> str:
    """Render calculations as a JSON array of objects."""
    return json.dumps([_as_dict(c) for c in calculations], indent=2) + "\n"


def generate_csv(calculations: list[Calculation]) -> str:
    """Render calculations as CSV with a header row."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=FIELDS, lineterminator="\n")
    writer.writeheader()
    for calc in calculations:
        writer.writerow(_as_dict(calc))
    return out.getvalue()


GENERATORS = {
    "text": generate_text,
    "json": generate_json,
    "csv": generate_csv,
}
