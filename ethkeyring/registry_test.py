import concurrent.futures

import pytest

from .defaults		import SECP256K1, ETH_SECP256K1
from .derive		import StandardStrategy, EthSecp256k1Strategy
from .errors		import AlgorithmMismatch, InvalidScalar, UnsupportedAlgorithm, KeyDerivationError
from .registry		import Algorithm, Registry, keygen_for, keygen_eth_secp256k1, keygen_secp256k1
from .types		import TypedPrivateKey
from .dependency_test	import BIP39_ABANDON, BIP39_ZOO, KEY_ABANDON_MASTER, KEY_ABANDON_ETH


def test_registry_default():
    registry			= Registry.default()
    assert registry.supported_algorithms() == ( ETH_SECP256K1, SECP256K1 )
    assert registry.supported_algorithms_ledger() == ( ETH_SECP256K1, SECP256K1 )
    assert len( registry ) == 2
    assert ETH_SECP256K1 in registry and SECP256K1 in registry
    assert "ed25519" not in registry
    assert [ a.algo for a in registry ] == [ ETH_SECP256K1, SECP256K1 ]
    assert repr( registry ) == "Registry(eth_secp256k1, secp256k1)"

    eth				= registry.resolve( ETH_SECP256K1 )
    assert isinstance( eth.strategy, EthSecp256k1Strategy )
    assert eth.keygen.algo == ETH_SECP256K1
    std				= registry.resolve( SECP256K1 )
    assert isinstance( std.strategy, StandardStrategy )
    assert std.keygen.algo == SECP256K1

    # Independently constructed registries share nothing
    assert Registry.default() is not registry


def test_registry_readonly():
    registry			= Registry.default()
    with pytest.raises( TypeError ):
        registry._algorithms["ed25519"] = registry.resolve( SECP256K1 )
    assert registry.supported_algorithms() == ( ETH_SECP256K1, SECP256K1 )


@pytest.mark.parametrize( "algo", [
    "ed25519", "", "ETH_SECP256K1", "secp256k1 ", "sr25519", None, ["secp256k1"],
] )
def test_registry_unsupported( algo ):
    """Unlisted signing algorithms are always refused, never substituted w/ a default."""
    registry			= Registry.default()
    with pytest.raises( UnsupportedAlgorithm ) as excinfo:
        registry.resolve( algo )
    assert excinfo.value.algo == algo
    with pytest.raises( UnsupportedAlgorithm ):
        registry.derive_key( BIP39_ABANDON, "", None, algo )
    with pytest.raises( UnsupportedAlgorithm ):
        registry.keygen( bytes.fromhex( KEY_ABANDON_MASTER ), algo )


def test_registry_construction():
    eth				= Algorithm( ETH_SECP256K1, EthSecp256k1Strategy(), keygen_eth_secp256k1 )
    std				= ( SECP256K1, StandardStrategy(), keygen_secp256k1 )

    registry			= Registry( [ std, eth ], ledger=[ SECP256K1 ] )
    assert registry.supported_algorithms() == ( SECP256K1, ETH_SECP256K1 )
    assert registry.supported_algorithms_ledger() == ( SECP256K1, )

    only			= Registry( [ eth ] )
    assert only.supported_algorithms() == only.supported_algorithms_ledger() == ( ETH_SECP256K1, )
    with pytest.raises( UnsupportedAlgorithm ):
        only.resolve( SECP256K1 )

    with pytest.raises( ValueError ):
        Registry( [ eth, eth ] )
    with pytest.raises( ValueError ):
        Registry( [ eth ], ledger=[ SECP256K1 ] )
    with pytest.raises( ValueError ):
        Registry( [ ( SECP256K1, EthSecp256k1Strategy(), keygen_secp256k1 ) ] )
    with pytest.raises( ValueError ):
        Registry( [] )


def test_registry_derive_key():
    registry			= Registry.default()
    assert registry.derive_key( BIP39_ABANDON, "", "m/44'/60'/0'/0/0", ETH_SECP256K1 ).hex() == KEY_ABANDON_MASTER
    assert registry.derive_key( BIP39_ABANDON, None, "m/44'/60'/0'/0/0", SECP256K1 ).hex() == KEY_ABANDON_ETH

    key				= registry.keygen( registry.derive_key( BIP39_ABANDON, "", None, ETH_SECP256K1 ), ETH_SECP256K1 )
    assert key == TypedPrivateKey( ETH_SECP256K1, bytes.fromhex( KEY_ABANDON_MASTER ))
    assert key.algo == ETH_SECP256K1


def test_registry_concurrent():
    registry			= Registry.default()
    jobs			= [
        ( mnemonic, algo )
        for mnemonic in ( BIP39_ABANDON, BIP39_ZOO )
        for algo in registry.supported_algorithms()
    ] * 4
    with concurrent.futures.ThreadPoolExecutor( max_workers=4 ) as executor:
        keys			= list( executor.map(
            lambda job: ( job, registry.derive_key( job[0], "", None, job[1] )), jobs
        ))
    expected			= dict(
        ( job, registry.derive_key( job[0], "", None, job[1] ))
        for job in set( jobs )
    )
    assert all( expected[job] == key for job,key in keys )


def test_keygen():
    bz				= bytes.fromhex( KEY_ABANDON_MASTER )
    key				= keygen_eth_secp256k1( bz, ETH_SECP256K1 )
    assert isinstance( key, TypedPrivateKey )
    assert key.algo == ETH_SECP256K1
    assert bytes( key ) == key.key == bz
    assert key.hex() == KEY_ABANDON_MASTER
    assert len( key ) == 32
    assert KEY_ABANDON_MASTER not in repr( key )
    assert repr( key ) == "TypedPrivateKey(eth_secp256k1: 256-bit)"
    with pytest.raises( AttributeError ):
        key.algo		= SECP256K1

    assert keygen_secp256k1( bz, SECP256K1 ).algo == SECP256K1
    assert keygen_secp256k1( bz, SECP256K1 ) != key
    assert keygen_for( ETH_SECP256K1 )( bz, ETH_SECP256K1 ) == key
    assert keygen_eth_secp256k1.__name__ == "keygen_eth_secp256k1"


@pytest.mark.parametrize( "keygen,algo", [
    ( keygen_eth_secp256k1, SECP256K1 ),
    ( keygen_eth_secp256k1, "ed25519" ),
    ( keygen_secp256k1, ETH_SECP256K1 ),
    ( keygen_secp256k1, "" ),
] )
def test_keygen_mismatch( keygen, algo ):
    with pytest.raises( AlgorithmMismatch ) as excinfo:
        keygen( bytes.fromhex( KEY_ABANDON_MASTER ), algo )
    assert excinfo.value.expected == keygen.algo
    assert excinfo.value.received == algo
    assert keygen.algo in str( excinfo.value )
    assert isinstance( excinfo.value, KeyDerivationError )


def test_keygen_length():
    with pytest.raises( InvalidScalar ):
        keygen_eth_secp256k1( b'\x01' * 31, ETH_SECP256K1 )
    with pytest.raises( InvalidScalar ):
        keygen_secp256k1( b'\x01' * 33, SECP256K1 )
