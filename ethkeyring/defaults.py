#
# Python-ethkeyring -- Multi-algorithm BIP-39 Key Derivation and Signing Algorithm Registry
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-ethkeyring is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-ethkeyring is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# Signing Algorithms
#
#     secp256k1		-- Tendermint/Cosmos standard BIP-32 HD derivation along the supplied path
#     eth_secp256k1	-- Ethereum-compatible; the BIP-32 master key of the seed, path ignored
#
SECP256K1			= "secp256k1"
ETH_SECP256K1			= "eth_secp256k1"

# Registration order is presentation order
ALGORITHMS			= ( ETH_SECP256K1, SECP256K1 )
ALGORITHMS_LEDGER		= ( ETH_SECP256K1, SECP256K1 )

#
# HD Wallet Derivation Paths (Standard BIP-44)
#
# BIP-44 defines the purpose of each depth level:
#    m / purpose’ / coin_type’ / account’ / change / address_index
#
# Ethereum-compatible chains use the Ethereum coin type 60.
#
PURPOSE				= 44
COIN_TYPE			= 60
PATH_DEFAULT			= f"m/{PURPOSE}'/{COIN_TYPE}'/0'/0/0"
HARDENED			= 0x80000000

# BIP-32 master key generation HMAC-SHA512 key
SEED_HMAC_KEY			= b"Bitcoin seed"

# The secp256k1 curve order; valid private keys are in [1,N)
SECP256K1_N			= 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
PRIVATE_KEY_BYTES		= 32

# BIP-39 Mnemonic entropy bit lengths (12, 15, 18, 21 and 24 words)
BITS_DEFAULT			= 128
BITS				= ( 128, 160, 192, 224, 256 )
LANGUAGE_DEFAULT		= "english"
