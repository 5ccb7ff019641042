"""
Default configuration settings for SVG Studio.
"""

DEFAULT_CONFIG = {
    # Export naming
    "base_filename": "design",  # Exported files are <base_filename>.pdf / .eps

    # PDF (raster-embedding) export
    "pdf_page_size": "A4",  # A4, LETTER, LEGAL, A3 or A5
    "pdf_image_offset": (10, 10),  # (x, y) from the top-left corner, in millimetres
    "pdf_image_width": 100,  # Embedded image width in millimetres

    # EPS (source-passthrough) export
    "eps_mime_type": "application/postscript",

    # Diagnostics
    "timestamp_format": "%X",  # Locale time format for diagnostic timestamps

    # Logging
    "log_level": "INFO",
}

# Starter document shown when a new session opens
DEFAULT_SVG = """<svg width="200" height="200" viewBox="0 0 200 200" xmlns="http://www.w3.org/2000/svg">
  <circle cx="100" cy="100" r="80" fill="#007acc" />
  <rect x="50" y="50" width="100" height="100" fill="none" stroke="white" stroke-width="4" />
  <text x="100" y="105" font-family="Arial" font-size="24" text-anchor="middle" fill="white">Hello</text>
</svg>"""
