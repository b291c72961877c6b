"""
Operations - the six workflows, one per ``--operation`` value:

- initKey:                                 provision the temporary account
- deployContract:                          deploy the BEP20 contract
- approveBindAndTransferOwnership:         approve, bind, hand over ownership
- refundRestBNB:                           return leftover BNB
- deploy_transferTokenAndOwnership_refund: deploy, hand over tokens and ownership, refund
- approveBindFromLedger:                   approve and bind signed on a Ledger
"""

INIT_KEY = "initKey"
DEPLOY_CONTRACT = "deployContract"
APPROVE_BIND = "approveBindAndTransferOwnership"
REFUND_REST_BNB = "refundRestBNB"
DEPLOY_TRANSFER_REFUND = "deploy_transferTokenAndOwnership_refund"
APPROVE_BIND_FROM_LEDGER = "approveBindFromLedger"

OPERATIONS = (
    INIT_KEY,
    DEPLOY_CONTRACT,
    APPROVE_BIND,
    REFUND_REST_BNB,
    DEPLOY_TRANSFER_REFUND,
    APPROVE_BIND_FROM_LEDGER,
)
