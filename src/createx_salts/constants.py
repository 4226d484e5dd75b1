"""Factory addresses and salt layout constants for createx-salts."""

# CreateX factory. Deployed at the same address on every supported EVM chain.
CREATEX_ADDRESS = "0xba5Ed099633D3B313e4D5F7bdc1305d3c28ba5Ed"

# keccak256 of the CREATE3 proxy init code CreateX deploys in stage one.
PROXY_INIT_CODE_HASH = bytes.fromhex("21c35dbe1b344a2488cf3321d6ce542f8e9f305544ff09e4993a62319a497c1f")

# The proxy's first (and only) CREATE uses nonce 1 (EIP-161).
PROXY_DEPLOY_NONCE = 1

ADDRESS_LENGTH = 20
SALT_LENGTH = 32
ENTROPY_LENGTH = 11

# Byte 21 of a salt: redeploy protection flag.
CROSS_CHAIN_FLAG = 0x00
CHAIN_BOUND_FLAG = 0x01

ZERO_ADDRESS = "0x" + "00" * ADDRESS_LENGTH
