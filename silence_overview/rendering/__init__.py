from silence_overview.rendering.section import render_section, to_row

__all__ = ["render_section", "to_row"]
