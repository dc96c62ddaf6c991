def clean_text(value):
    return (value or "").strip()


def clean_list(values):
    return [v.strip() for v in values if v and v.strip()]


def split_locations(location):
    """'Boston, Cambridge' -> ['Boston', 'Cambridge']"""
    if not location:
        return []
    return clean_list(location.split(","))


def compose_keywords(keywords, location=None):
    """
    Fold the location list into the free-text query:
    nurse + "Boston, Cambridge" -> nurse in "Boston" or "Cambridge"
    """
    keywords = clean_text(keywords)
    locations = split_locations(location)
    if not locations:
        return keywords

    quoted = " or ".join(f'"{loc}"' for loc in locations)
    return f"{keywords} in {quoted}"
