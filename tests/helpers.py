from types import SimpleNamespace


def font_face(family: str | None = None, *ranges: str, quote: str = "'", src: str = "font.woff2") -> str:
    """
    Build one @font-face rule.

    A None family omits the font-family declaration; no ranges omits
    unicode-range.
    """
    lines = ["@font-face {"]
    if family is not None:
        lines.append(f"  font-family: {quote}{family}{quote};")
    lines.append(f"  src: url('{src}') format('woff2');")
    if ranges:
        lines.append(f"  unicode-range: {', '.join(ranges)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


class FakeResponse:
    """Stand-in for the object urlopen() returns, usable as a context manager."""

    def __init__(self, body: str | bytes, charset: str | None = "utf-8"):
        if isinstance(body, str):
            body = body.encode(charset or "utf-8")
        self._body = body
        self.headers = SimpleNamespace(get_content_charset=lambda: charset)

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False
