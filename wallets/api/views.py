from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import APIView

from wallets.api.responses import error_response, server_error_response
from wallets.api.serializers import (
    SendRequestSerializer,
    TransactionSerializer,
    WalletBalanceSerializer,
)
from wallets.domain.exceptions import (
    InsufficientFunds,
    InvalidInput,
    StorageUnavailable,
    UnknownParty,
)

CLIENT_ERRORS = (InvalidInput, UnknownParty, InsufficientFunds)


class SendAPIView(APIView):
    transfer_service = None

    def post(self, request):
        serializer = SendRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response("invalid request body")

        data = serializer.validated_data
        try:
            self.transfer_service.send(data["from"], data["to"], data["amount"])
        except CLIENT_ERRORS as exc:
            return error_response(str(exc))
        except StorageUnavailable:
            return server_error_response()

        return Response(status=http_status.HTTP_200_OK)


class TransactionsAPIView(APIView):
    query_service = None

    def get(self, request):
        try:
            records = self.query_service.list_recent(request.query_params.get("count"))
        except InvalidInput as exc:
            return error_response(str(exc))
        except StorageUnavailable:
            return server_error_response()

        return Response(
            TransactionSerializer(records, many=True).data,
            status=http_status.HTTP_200_OK,
        )


class WalletBalanceAPIView(APIView):
    query_service = None

    def get(self, request, wallet_id):
        try:
            wallet = self.query_service.get_wallet_balance(wallet_id)
        except (InvalidInput, UnknownParty) as exc:
            return error_response(str(exc))
        except StorageUnavailable:
            return server_error_response()

        return Response(
            WalletBalanceSerializer(wallet).data,
            status=http_status.HTTP_200_OK,
        )
