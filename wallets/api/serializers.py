from rest_framework import serializers


class SendRequestSerializer(serializers.Serializer):
    # "from" is a keyword, so the fields are declared here instead of as attributes.
    def get_fields(self):
        return {
            "from": serializers.CharField(allow_blank=True, trim_whitespace=False),
            "to": serializers.CharField(allow_blank=True, trim_whitespace=False),
            "amount": serializers.CharField(allow_blank=True, trim_whitespace=False),
        }


class TransactionSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    sender = serializers.UUIDField()
    receiver = serializers.UUIDField()
    amount = serializers.DecimalField(
        max_digits=20, decimal_places=2, coerce_to_string=False
    )
    time = serializers.DateTimeField()


class WalletBalanceSerializer(serializers.Serializer):
    Id = serializers.UUIDField(source="id")
    Balance = serializers.DecimalField(
        source="balance", max_digits=20, decimal_places=2, coerce_to_string=False
    )
