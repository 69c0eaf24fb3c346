"""Shared identities, addresses and service values for conviction tests."""

SERVICE_URI = "https://conviction.test/api"
SERVICE_DID = "did:key:z6MkService"
ALICE_DID = "did:key:z6MkAlice"
BOB_DID = "did:key:z6MkBob"
CHAIN_ID = 4
ALICE_ADDRESS = "0xAbC0000000000000000000000000000000000001"
BOB_ADDRESS = "0xbob0000000000000000000000000000000000002"

DEFINITIONS = {
    "convictionstate": "kjzl-definition-convictionstate",
    "convictions": "kjzl-definition-convictions",
}
