import bleach


def clean_text(v):
    """Strip surrounding whitespace and any markup from free text."""
    return bleach.clean((v or '').strip(), strip=True)
