"""
==========================================================
BRANDING & IDENTITY
==========================================================
Change these values to rebrand the entire site instantly.
The header, footer and page titles read from here.
"""

# --- Core Identity ---
SITE_NAME = "Employee Management System"
SITE_TAGLINE = "Add, update and remove employee records."

# --- Company Info ---
COMPANY_NAME = "Pinakapani"

# --- SEO & Meta ---
META_TITLE_SUFFIX = f" | {SITE_NAME}"
META_DESCRIPTION = SITE_TAGLINE

# --- Copyright ---
COPYRIGHT_YEAR = "2026"
COPYRIGHT_TEXT = f"© {COPYRIGHT_YEAR} {COMPANY_NAME}. All rights reserved."
