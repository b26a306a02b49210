def normalize_text(s: str) -> str:
    return " ".join((s or "").replace("\u3000", " ").split())


def clip(s: str, limit: int = 300) -> str:
    s = s or ""
    return s if len(s) <= limit else s[:limit] + f"...(+{len(s) - limit} chars)"
