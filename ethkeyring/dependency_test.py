import contextlib

import eth_account
import hdwallet

from mnemonic		import Mnemonic

BIP39_ABANDON			= "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
BIP39_ZOO			= 'zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong'

SEED_ABANDON_HEX		= "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
SEED_ABANDON_TREZOR_HEX		= "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"

# The BIP-32 master private key of the BIP39_ABANDON seed (and the eth_secp256k1 key)
KEY_ABANDON_MASTER		= "1837c1be8e2995ec11cda2b066151be2cfb48adf9e47b151d46adab3a21cdf67"
# The standard m/44'/60'/0'/0/0 key (and the well-known Ethereum address)
KEY_ABANDON_ETH			= "1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727"
ADDR_ABANDON_ETH		= "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"


class substitute( contextlib.ContextDecorator ):
    """Replace some attribute (eg. a random or hashing function) during testing, to get determinism
    or to force failures in the resultant derivations.

    """
    def __init__( self, thing, attribute, value ):
        self.thing		= thing
        self.attribute		= attribute
        self.value		= value
        self.saved		= None

    def __enter__( self ):
        self.saved		= getattr( self.thing, self.attribute )
        setattr( self.thing, self.attribute, self.value )

    def __exit__( self, *exc ):
        setattr( self.thing, self.attribute, self.saved )


def nonrandom_bytes( n ):
    return b'\0' * n


def test_bip39_seed():
    """Confirm python-mnemonic produces the standard BIP-39 test vector seeds."""
    assert Mnemonic.to_seed( BIP39_ABANDON, passphrase="" ).hex() == SEED_ABANDON_HEX
    assert Mnemonic.to_seed( BIP39_ABANDON, passphrase="TREZOR" ).hex() == SEED_ABANDON_TREZOR_HEX
    m				= Mnemonic( "english" )
    assert m.check( BIP39_ABANDON )
    assert m.check( BIP39_ZOO )
    assert not m.check( BIP39_ABANDON.replace( "about", "above" ))
    assert m.to_mnemonic( nonrandom_bytes( 16 )) == BIP39_ABANDON


def test_hdwallet_master():
    """The hdwallet BIP-32 master key is the first half of the HMAC-SHA512 "Bitcoin seed" of the seed."""
    wallet			= hdwallet.HDWallet( symbol="ETH" )
    wallet.from_seed( SEED_ABANDON_HEX )
    assert wallet.private_key() == KEY_ABANDON_MASTER
    wallet.from_path( "m/44'/60'/0'/0/0" )
    assert wallet.private_key() == KEY_ABANDON_ETH


def test_eth_account_key():
    acct			= eth_account.Account.from_key( bytes.fromhex( KEY_ABANDON_ETH ))
    assert acct.address == ADDR_ABANDON_ETH
    assert bytes( acct.key ).hex() == KEY_ABANDON_ETH
