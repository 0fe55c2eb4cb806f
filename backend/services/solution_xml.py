"""Render a game solution in the ``<solucion>`` XML vocabulary existing clients parse."""

from xml.sax.saxutils import escape


def solution_to_xml(descriptors: list[str]) -> str:
    """
    <solucion tam="N"><barco>row#col#orient#size</barco>...</solucion>

    No XML declaration and no whitespace between elements.
    """
    parts = [f'<solucion tam="{len(descriptors)}">']
    parts.extend(f"<barco>{escape(descriptor)}</barco>" for descriptor in descriptors)
    parts.append("</solucion>")
    return "".join(parts)
