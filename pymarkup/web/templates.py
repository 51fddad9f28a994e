from __future__ import annotations

from string import Template

DOCUMENT_HTML = Template(
    """<!DOCTYPE html>
<html lang='$lang'>
<head>
<title>$title</title>
$head
</head>
<body>
$body
<noscript>$no_script</noscript>
</body>
</html>
"""
)


def render_document(*, lang: str, title: str, head: str, body: str, no_script: str) -> str:
    return DOCUMENT_HTML.substitute(
        lang=lang, title=title, head=head, body=body, no_script=no_script
    )
