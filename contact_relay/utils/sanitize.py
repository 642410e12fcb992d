# "&" first, so entities produced by later replacements are left intact
HTML_ESCAPES = [("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "&#039;")]


def escape_html(text: str) -> str:
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def nl2br(text: str) -> str:
    return text.replace("\n", "<br>")
