from django.db import models
from django.db.models import Q


class Transaction(models.Model):
    sender = models.ForeignKey(
        "wallets.Wallet",
        on_delete=models.PROTECT,
        related_name="sent_transactions",
    )
    receiver = models.ForeignKey(
        "wallets.Wallet",
        on_delete=models.PROTECT,
        related_name="received_transactions",
    )
    amount = models.BigIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(
                fields=["-created_at", "-id"],
                name="txn_created_desc_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(amount__gt=0),
                name="transaction_amount_gt_zero",
            ),
        ]

    def __str__(self):
        return f"Transaction<{self.pk}:{self.sender_id}->{self.receiver_id}>"
