from rest_framework.response import Response


def error_response(code: str, message: str, status: int, details: dict | None = None) -> Response:
    body = {"code": code, "message": message}
    if details:
        body["details"] = details
    return Response({"error": body}, status=status)


def domain_error_response(exc) -> Response:
    """Envelope for exceptions carrying code / status_code / details."""
    return error_response(exc.code, str(exc), exc.status_code, details=getattr(exc, "details", None))
