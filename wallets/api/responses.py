from rest_framework import status
from rest_framework.response import Response

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def error_response(message, *, status_code=status.HTTP_400_BAD_REQUEST):
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = INTERNAL_ERROR_MESSAGE
    return Response({"error": message}, status=status_code)


def server_error_response():
    return error_response(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
