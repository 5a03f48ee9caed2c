def mask_phone(phone: str) -> str:
    """Keep the first three and last four characters of a phone number."""
    if len(phone) <= 7:
        return "*" * len(phone)
    return phone[:3] + "*" * (len(phone) - 7) + phone[-4:]
