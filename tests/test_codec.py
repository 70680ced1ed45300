import pytest

from decipin import (
    CellBounds, DeciPinCodec, DeciPinConfig, InvalidFormatError, LatLon, OutOfRangeError,
    cell_bounds, decode, encode, is_valid
)
from decipin.codec import _get_codec
from decipin.config import DEFAULT_CONFIG

from tests.functions import assert_latlon_close


def test_encode():
    assert encode(12.3456, 65.4321) == '1265.DE43/VW21'
    assert encode(12.3456, 65.4321, include_separators=False) == '1265DE43VW21'
    assert encode(5, 7.5) == '0507.AA50/QQ00'
    assert encode('12.3456', '65.4321') == '1265.DE43/VW21'


def test_encode_truncates():
    # Truncated toward zero, never rounded up into the next cell
    assert encode(12.34569, 65.43219) == '1265.DE43/VW21'
    # Decimal text decides the cell, not the nearest binary double
    assert encode(0.29, 0.29) == '0000.CJ29/QQ00'
    assert encode(1.1, 2.3) == '0102.BA30/QQ00'
    # More significant digits than the default decimal context holds
    assert encode('12.345699999999999999999999999999', 0) == '1200.DE00/VW00'


def test_encode_boundaries():
    assert encode(0, 0) == '0000.AA00/QQ00'
    assert encode(0, 0, include_separators=False) == '0000AA00QQ00'
    assert encode(99.9999, 99.9999) == '9999.JJ99/ZZ99'


@pytest.mark.parametrize('lat,lon,axis', [
    (100, 0, 'lat'),
    (-0.1, 0, 'lat'),
    (99.99995, 0, 'lat'),
    (0, 100, 'lon'),
    (0, -0.0001, 'lon'),
    (float('nan'), 0, 'lat'),
    (0, float('inf'), 'lon'),
    ('abc', 0, 'lat'),
    (None, 0, 'lat'),
])
def test_encode_out_of_range(lat, lon, axis):
    with pytest.raises(OutOfRangeError) as exc_info:
        encode(lat, lon)

    assert exc_info.value.axis == axis
    assert exc_info.value.value is (lat if axis == 'lat' else lon)
    assert isinstance(exc_info.value, ValueError)


def test_encode_out_of_range_message():
    with pytest.raises(OutOfRangeError, match=r'lon out of range \[0.0, 99.9999\]: 120'):
        encode(0, 120)


def test_encode_length():
    for lat, lon in [(0, 0), (1.5, 2.25), (45.123456, 9.87654), (99.9999, 0)]:
        assert len(encode(lat, lon)) == 14
        assert len(encode(lat, lon, include_separators=False)) == 12


def test_encode_warns_once_on_truncation(caplog, monkeypatch):
    monkeypatch.setattr('decipin.utils.logging._WARNINGS', set())

    encode(12.3456, 65.4321)
    assert 'truncates' not in caplog.text

    encode(12.345678, 65.4321)
    assert 'more than 4 decimal places' in caplog.text

    encode(1.234567, 1.234567)
    assert caplog.text.count('more than 4 decimal places') == 1


def test_decode():
    assert decode('1265.DE43/VW21') == LatLon(12.34565, 65.43215)
    assert decode('1265DE43VW21') == LatLon(12.34565, 65.43215)
    assert decode('0000.AA00/QQ00') == LatLon(0.00005, 0.00005)
    assert decode('9999.JJ99/ZZ99') == LatLon(99.99995, 99.99995)


def test_decode_as_str():
    assert decode('1265.DE43/VW21', as_str=True) == LatLon('12.34565', '65.43215')
    assert decode('0000.AA00/QQ00', as_str=True) == LatLon('00.00005', '00.00005')
    assert decode('9999JJ99ZZ99', as_str=True) == LatLon('99.99995', '99.99995')


def test_decode_case_insensitive():
    expected = decode('1265.DE43/VW21')
    assert decode('1265.de43/vw21') == expected
    assert decode('1265.dE43/Vw21') == expected
    assert decode('1265de43vw21') == expected


def test_decode_single_separator():
    expected = decode('1265.DE43/VW21')
    assert decode('1265DE43/VW21') == expected
    assert decode('1265.DE43VW21') == expected


@pytest.mark.parametrize('code', [
    '',
    '0000.AA00/QQ0',
    '0000.AA00/QQ000',
    '00000.AA00/QQ00',
    '0000.A100/QQ00',
    '0000.AA00/Q100',
    '0000.QQ00/AA00',
    '0000.AK00/QQ00',
    '0000.AA00/PQ00',
    '0000.AAB0/QQ00',
    '0000-AA00-QQ00',
    '0000/AA00.QQ00',
    '0000..AA00/QQ00',
    ' 0000.AA00/QQ00',
    '0000.AA00/QQ00\n',
    'A000.AA00/QQ00',
    '0000.\ufb0000/QQ00',
    '0000.AA00/\u017f\u017f00',
    '0000.\u0131\u013100/QQ00',
])
def test_decode_invalid(code):
    with pytest.raises(InvalidFormatError):
        decode(code)

    assert not is_valid(code)


def test_decode_invalid_carries_code():
    with pytest.raises(InvalidFormatError) as exc_info:
        decode('0000.ak00/qq00')

    assert exc_info.value.code == '0000.AK00/QQ00'
    assert isinstance(exc_info.value, ValueError)

    with pytest.raises(InvalidFormatError):
        decode(None)

    with pytest.raises(InvalidFormatError):
        decode(12345678)


def test_is_valid():
    assert is_valid('1265.DE43/VW21')
    assert is_valid('1265de43vw21')
    assert not is_valid('1265.DE43/VW2')
    assert not is_valid(None)


@pytest.mark.parametrize('lat,lon', [
    (0, 0),
    (0.00004, 0.00009),
    (0.29, 0.57),
    (12.3456, 65.4321),
    (45.000049, 45.000051),
    (33.33333333, 66.66666666),
    (99.9999, 99.9999),
    (99.99989999, 0.0001),
])
def test_round_trip(lat, lon):
    with_separators = decode(encode(lat, lon, include_separators=True))
    without_separators = decode(encode(lat, lon, include_separators=False))

    assert with_separators == without_separators
    assert_latlon_close(with_separators, lat, lon)
    assert is_valid(encode(lat, lon))


def test_cell_bounds():
    bounds = cell_bounds('1265.DE43/VW21')
    assert bounds == CellBounds(12.3456, 65.4321, 12.3457, 65.4322)
    assert bounds.contains(12.34561, 65.43219)
    assert not bounds.contains(12.3457, 65.4321)

    assert_latlon_close(bounds.center, *decode('1265.DE43/VW21'), abs_tol=1e-9)

    with pytest.raises(InvalidFormatError):
        cell_bounds('1265.DE43/VW2')


def test_cell_bounds_contain_encoded_point():
    for lat, lon in [(0, 0), (0.29, 0.29), (12.345678, 65.432109), (99.9999, 99.9999)]:
        assert cell_bounds(encode(lat, lon)).contains(lat, lon)


def test_codec_custom_config():
    config = DeciPinConfig(start_hi='B', start_lo='L', separators=('-', '-'))
    codec = DeciPinCodec(config)

    assert codec.encode(0, 0) == '0000-BB00-LL00'
    assert codec.encode(12.3456, 65.4321) == '1265-EF43-QR21'
    assert codec.decode('1265-EF43-QR21') == LatLon(12.34565, 65.43215)
    assert codec.decode('1265ef43qr21') == LatLon(12.34565, 65.43215)

    assert encode(12.3456, 65.4321, config=config) == '1265-EF43-QR21'
    assert decode('1265-EF43-QR21', config=config) == LatLon(12.34565, 65.43215)

    with pytest.raises(InvalidFormatError):
        codec.decode('1265.DE43/VW21')

    with pytest.raises(InvalidFormatError):
        decode('1265-EF43-QR21')


def test_codec_custom_bounds():
    config = DeciPinConfig(min_lat=10, max_lat=20, max_lon=50)
    codec = DeciPinCodec(config)

    assert codec.encode(15, 25) == '1525.AA00/QQ00'

    with pytest.raises(OutOfRangeError) as exc_info:
        codec.encode(9.9999, 25)
    assert exc_info.value.minimum == 10.
    assert exc_info.value.maximum == 20.

    with pytest.raises(OutOfRangeError):
        codec.encode(15, 50.0001)


def test_codec_default_separators():
    codec = DeciPinCodec(DeciPinConfig(include_separators=False))
    assert codec.encode(0, 0) == '0000AA00QQ00'
    assert codec.encode(0, 0, include_separators=True) == '0000.AA00/QQ00'


def test_codec_repr():
    assert repr(DeciPinCodec()) == f'<DeciPinCodec({DEFAULT_CONFIG!r})>'


def test_codec_logger():
    assert DeciPinCodec().logger.name == 'decipin.codec.DeciPinCodec'


def test_module_codec_cache():
    config = DeciPinConfig(start_hi='B', start_lo='L')
    assert _get_codec(config) is _get_codec(DeciPinConfig(start_hi='B', start_lo='L'))
    assert _get_codec(None).config == DEFAULT_CONFIG

    for n in range(100):
        encode(0, 0, config=DeciPinConfig(max_lat=n / 2))
    assert _get_codec.cache_info().currsize <= _get_codec.cache_info().maxsize
