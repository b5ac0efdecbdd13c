import uuid

def generate_request_id() -> str:
    return str(uuid.uuid4())


def error_detail(exc: BaseException) -> dict:
    """extra= payload describing an exception for the JSON log line."""
    return {"error": f"{type(exc).__name__}: {exc}"}
