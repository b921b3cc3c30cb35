# pnmdecoder.py

# Copyright (c) 2011-2023, Christoph Gohlke
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""Decode PNM image streams.

Pnmdecoder is a Python library to decode images in the Netpbm formats from
forward-only binary streams:

- PBM (Portable Bit Map): P1 (text) and P4 (binary)
- PGM (Portable Gray Map): P2 (text) and P5 (binary)
- PPM (Portable Pixel Map): P3 (text) and P6 (binary)
- PAM (Portable Arbitrary Map): P7, BLACKANDWHITE, GRAYSCALE, and RGB

The Netpbm formats are specified at http://netpbm.sourceforge.net/doc/.

The stream is read one header byte at a time and never advanced past the
image payload, such that trailing data can be read after decoding.
Samples are returned as flat, row-major, component-interleaved arrays of
8-bit or big-endian 16-bit unsigned integers.
In contrast to the file format, decoded PBM samples are 1 for white and
0 for black.
PAM images with alpha channels are not supported.

No gamma correction or scaling is performed.

:Author: `Christoph Gohlke <https://www.cgohlke.com>`_
:License: BSD 3-Clause
:Version: 2026.10.18

Quickstart
----------

Install the pnmdecoder package and all dependencies from the
`Python Package Index <https://pypi.org/project/pnmdecoder/>`_::

    python -m pip install -U pnmdecoder

See `Examples`_ for using the programming interface.

Requirements
------------

This release has been tested with the following requirements and dependencies
(other versions may work):

- `CPython 3.9.13, 3.10.11, 3.11.9, 3.12.7 <https://www.python.org>`_
- `NumPy 1.26.4 <https://pypi.org/project/numpy/>`_

Revisions
---------

2026.10.18

- Initial release derived from netpbmfile.
- Decode P1 to P7 from non-seekable streams.
- Validate PAM headers and tuple types.
- Return stream and parsed header after decoding.

Examples
--------

Decode a text graymap from a binary stream:

>>> import io
>>> with PnmDecoder(io.BytesIO(b'P2 3 2 255\\n0 1 2\\n3 4 5\\n')) as pnm:
...     pnm.magicnumber
...     pnm.dimensions()
...     pnm.colortype()
...     pnm.decode().tolist()
'P2'
(3, 2)
'GRAY8'
[0, 1, 2, 3, 4, 5]

Decode a binary bitmap and continue reading the stream after the image:

>>> pnm = PnmDecoder(io.BytesIO(b'P4 6 2\\n\\x6c\\x90trailing'))
>>> pnm.decode().tolist()
[1, 0, 0, 1, 0, 0, 0, 1, 1, 0, 1, 1]
>>> stream, header = pnm.release()
>>> stream.read()
b'trailing'
>>> header.record
BitmapHeader(encoding='BINARY', width=6, height=2)

"""

from __future__ import annotations

__version__ = '2026.10.18'

__all__ = [
    'imread',
    'PnmDecoder',
    'PnmReader',
    'PnmHeader',
    'BitmapHeader',
    'GraymapHeader',
    'PixmapHeader',
    'ArbitraryHeader',
    'TupleType',
    'TUPLE_TYPES',
    'MAGIC_NUMBER',
    'tuple_type',
    'read_samples',
    'PnmError',
    'FormatError',
    'TruncatedInputError',
    'UnsupportedColorError',
]

import os

import numpy

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from typing import BinaryIO, Iterator, Literal, Union

    PathLike = Union[str, os.PathLike]
    Encoding = Union[Literal['ASCII'], Literal['BINARY']]
    MagicNumber = Union[
        Literal['P1'],
        Literal['P2'],
        Literal['P3'],
        Literal['P4'],
        Literal['P5'],
        Literal['P6'],
        Literal['P7'],
    ]
    HeaderRecord = Union[
        'BitmapHeader', 'GraymapHeader', 'PixmapHeader', 'ArbitraryHeader'
    ]

MAGIC_NUMBER: dict[str, tuple[str, str]] = {
    'P1': ('BITMAP', 'ASCII'),
    'P2': ('GRAYMAP', 'ASCII'),
    'P3': ('PIXMAP', 'ASCII'),
    'P4': ('BITMAP', 'BINARY'),
    'P5': ('GRAYMAP', 'BINARY'),
    'P6': ('PIXMAP', 'BINARY'),
    'P7': ('ARBITRARY', 'BINARY'),
}
"""Map magicnumber to kind of image and encoding of samples."""

PAM_TUPLTYPES = (
    'BLACKANDWHITE',
    'BLACKANDWHITE_ALPHA',
    'GRAYSCALE',
    'GRAYSCALE_ALPHA',
    'RGB',
    'RGB_ALPHA',
)
"""PAM tuple types with known semantics."""

WHITESPACE = b'\t\n\x0b\x0c\r '

CHUNKSIZE = 2**20


def imread(file: PathLike | BinaryIO, /) -> numpy.ndarray:
    """Return image data from PNM file.

    Parameters:
        file:
            Name of file or open binary stream to read.

    Returns:
        Image samples of shape (height, width) or (height, width, 3).

    """
    with PnmDecoder(file) as pnm:
        image = pnm.asarray()
    return image


class PnmError(ValueError):
    """Base class of errors raised when decoding PNM streams."""


class FormatError(PnmError):
    """Stream content does not conform to PNM grammar."""


class TruncatedInputError(PnmError):
    """Stream ended before all required bytes could be read."""


class UnsupportedColorError(PnmError):
    """Image is well formed but its color type cannot be decoded.

    Parameters:
        colortype:
            Color type of image, for example, 'RGBA8'.

    """

    colortype: str
    """Color type of image."""

    def __init__(self, colortype: str, /) -> None:
        super().__init__(f'color type {colortype!r} not supported')
        self.colortype = colortype


class BitmapHeader(NamedTuple):
    """PBM header."""

    encoding: Encoding
    width: int
    height: int


class GraymapHeader(NamedTuple):
    """PGM header."""

    encoding: Encoding
    width: int
    height: int
    maxwhite: int


class PixmapHeader(NamedTuple):
    """PPM header."""

    encoding: Encoding
    width: int
    height: int
    maxval: int


class ArbitraryHeader(NamedTuple):
    """PAM header.

    The order of fields follows the order of lines in PAM files written by
    netpbm.

    """

    height: int
    width: int
    depth: int
    maxval: int
    tupltype: str | None = None
    """Space-joined values of TUPLTYPE lines, if any."""

    @property
    def custom(self) -> bool:
        """Tuple type is not one of the known PAM tuple types."""
        return self.tupltype is not None and self.tupltype not in PAM_TUPLTYPES


class PnmHeader(NamedTuple):
    """Parsed header of PNM stream."""

    magicnumber: MagicNumber
    """ID determining PNM subtype."""

    record: HeaderRecord
    """Subtype specific header fields."""

    @property
    def subtype(self) -> str:
        """Kind of image: BITMAP, GRAYMAP, PIXMAP, or ARBITRARY."""
        return MAGIC_NUMBER[self.magicnumber][0]

    @property
    def encoding(self) -> Encoding:
        """Encoding of samples: ASCII or BINARY."""
        return MAGIC_NUMBER[self.magicnumber][1]  # type: ignore

    @property
    def width(self) -> int:
        """Number of columns in image."""
        return self.record.width

    @property
    def height(self) -> int:
        """Number of rows in image."""
        return self.record.height


class TupleType(NamedTuple):
    """Decodable combination of sample kind and number of components.

    PBMBIT samples are packed 8 per byte with black encoded as 1.
    They are decoded to 0 for black and 1 for white.
    BWBIT samples are stored one per byte and must be 0 or 1.

    """

    name: str
    """ID of tuple type."""

    components: int
    """Number of samples per pixel."""

    dtype: str
    """Data type of decoded samples."""

    maxsample: int
    """Maximum value of a sample in the stream."""

    colortype: str
    """Color type of decoded image."""

    def bytelen(self, width: int, height: int, /) -> int:
        """Return number of bytes of binary encoded image."""
        count = width * self.components
        if self.name == 'PBMBIT':
            # rows are padded to full bytes
            return (count + 7) // 8 * height
        return count * height * numpy.dtype(self.dtype).itemsize

    def frombytes(
        self, data: bytes, width: int, height: int, /
    ) -> numpy.ndarray:
        """Return flat array of samples from binary encoded image."""
        if self.name == 'PBMBIT':
            count = width * self.components
            packed = numpy.frombuffer(data, 'u1').reshape(
                height, (count + 7) // 8
            )
            bits = numpy.unpackbits(packed, axis=-1)
            if bits[:, count:].any():
                log_warning('ignoring non-zero padding bits in PBM rows')
            return (bits[:, :count] ^ 1).reshape(-1)
        samples = numpy.frombuffer(data, self.dtype)
        if self.name == 'BWBIT' and samples.size and samples.max() > 1:
            raise FormatError('sample value outside of bounds')
        return samples.copy()

    def fromunsigned(self, value: int, /) -> int:
        """Return sample from value of ASCII encoded sample."""
        if value > self.maxsample:
            raise FormatError(f'sample value outside of bounds: {value}')
        if self.name == 'PBMBIT':
            # 1 is black in PBM
            return value ^ 1
        return value


TUPLE_TYPES: dict[str, TupleType] = {
    'PBMBIT': TupleType('PBMBIT', 1, 'u1', 1, 'GRAY1'),
    'BWBIT': TupleType('BWBIT', 1, 'u1', 1, 'GRAY1'),
    'GRAY8': TupleType('GRAY8', 1, 'u1', 255, 'GRAY8'),
    'GRAY16': TupleType('GRAY16', 1, '>u2', 65535, 'GRAY16'),
    'RGB8': TupleType('RGB8', 3, 'u1', 255, 'RGB8'),
    'RGB16': TupleType('RGB16', 3, '>u2', 65535, 'RGB16'),
}
"""Decodable tuple types by name."""


def tuple_type(record: HeaderRecord, /) -> TupleType:
    """Return tuple type to decode samples of image with header record.

    Raises:
        FormatError:
            Header fields are inconsistent or out of range.
        UnsupportedColorError:
            Image has alpha channel.

    """
    if isinstance(record, BitmapHeader):
        return TUPLE_TYPES['PBMBIT']
    if isinstance(record, GraymapHeader):
        return _bitdepth_type('GRAY', record.maxwhite)
    if isinstance(record, PixmapHeader):
        return _bitdepth_type('RGB', record.maxval)
    if not isinstance(record, ArbitraryHeader):
        raise TypeError(f'invalid header record {record!r}')

    depth = record.depth
    maxval = record.maxval
    tupltype = record.tupltype
    if tupltype is None:
        if depth == 1:
            return TUPLE_TYPES['GRAY8']
        if depth == 3:
            return TUPLE_TYPES['RGB8']
        if depth == 2:
            raise UnsupportedColorError('GRAYA8')
        if depth == 4:
            raise UnsupportedColorError('RGBA8')
        raise FormatError(f'depth {depth} not supported without TUPLTYPE')
    if tupltype == 'BLACKANDWHITE':
        if depth != 1 or maxval != 1:
            raise FormatError(
                'invalid depth or maxval for tuple type BLACKANDWHITE'
            )
        return TUPLE_TYPES['BWBIT']
    if tupltype == 'GRAYSCALE':
        if depth != 1 or maxval > 65535:
            raise FormatError(
                'invalid depth or maxval for tuple type GRAYSCALE'
            )
        return _bitdepth_type('GRAY', maxval)
    if tupltype == 'RGB':
        if depth != 3 or maxval > 65535:
            raise FormatError('invalid depth or maxval for tuple type RGB')
        return _bitdepth_type('RGB', maxval)
    if tupltype == 'BLACKANDWHITE_ALPHA':
        raise UnsupportedColorError('GRAYA1')
    if tupltype == 'GRAYSCALE_ALPHA':
        raise UnsupportedColorError('GRAYA8')
    if tupltype == 'RGB_ALPHA':
        raise UnsupportedColorError('RGBA8')
    raise FormatError(f'tuple type not recognized: {tupltype!r}')


def _bitdepth_type(kind: str, maxval: int, /) -> TupleType:
    """Return 8 or 16-bit GRAY or RGB tuple type for maxval."""
    if maxval <= 255:
        return TUPLE_TYPES[kind + '8']
    if maxval <= 65535:
        return TUPLE_TYPES[kind + '16']
    raise FormatError(f'maxval exceeds 65535: {maxval}')


def read_samples(
    reader: PnmReader, header: PnmHeader, tupletype: TupleType, /
) -> numpy.ndarray:
    """Return flat array of image samples read from stream.

    Parameters:
        reader:
            Reader positioned at start of image data.
        header:
            Parsed header of image.
        tupletype:
            Tuple type resolved from header.

    """
    width = header.width
    height = header.height
    if header.encoding == 'BINARY':
        data = reader.read_exact(tupletype.bytelen(width, height))
        return tupletype.frombytes(data, width, height)

    read = reader.read_uint
    fromunsigned = tupletype.fromunsigned
    count = width * height * tupletype.components
    samples = [fromunsigned(read()) for _ in range(count)]
    return numpy.array(samples, dtype=tupletype.dtype)


class PnmReader:
    """Read PNM header tokens and image data from binary stream.

    The stream is read one byte at a time while parsing headers and text
    samples, and never advanced beyond the bytes required.
    Comments start with '#' and end at the next line terminator.

    Parameters:
        fh:
            Open binary stream to read.

    """

    _fh: BinaryIO
    _comment: bool

    def __init__(self, fh: BinaryIO, /) -> None:
        self._fh = fh
        self._comment = False

    @property
    def stream(self) -> BinaryIO:
        """Underlying binary stream."""
        return self._fh

    def read_header(self) -> PnmHeader:
        """Return header parsed from stream."""
        magic = self.read_magic()
        magicnumber = magic.decode('ascii') if magic.isascii() else ''
        if magicnumber not in MAGIC_NUMBER:
            raise FormatError(
                f'expected magic number P1 through P7, got {magic!r}'
            )
        kind, encoding = MAGIC_NUMBER[magicnumber]
        record: HeaderRecord
        if kind == 'BITMAP':
            record = self.read_bitmap_header(encoding)  # type: ignore
        elif kind == 'GRAYMAP':
            record = self.read_graymap_header(encoding)  # type: ignore
        elif kind == 'PIXMAP':
            record = self.read_pixmap_header(encoding)  # type: ignore
        else:
            record = self.read_arbitrary_header()
        return PnmHeader(magicnumber, record)  # type: ignore

    def read_bitmap_header(self, encoding: Encoding, /) -> BitmapHeader:
        """Return PBM header fields following magic number."""
        width = self.read_uint()
        height = self.read_uint()
        return BitmapHeader(encoding, width, height)

    def read_graymap_header(self, encoding: Encoding, /) -> GraymapHeader:
        """Return PGM header fields following magic number."""
        encoding, width, height, maxval = self.read_pixmap_header(encoding)
        return GraymapHeader(encoding, width, height, maxval)

    def read_pixmap_header(self, encoding: Encoding, /) -> PixmapHeader:
        """Return PPM header fields following magic number."""
        width = self.read_uint()
        height = self.read_uint()
        maxval = self.read_uint()
        if maxval == 0:
            log_warning('non-compliant maxval 0')
        return PixmapHeader(encoding, width, height, maxval)

    def read_arbitrary_header(self) -> ArbitraryHeader:
        """Return PAM header fields following magic number.

        Header lines may appear in any order. HEIGHT, WIDTH, DEPTH, and
        MAXVAL are required exactly once. Multiple TUPLTYPE lines are
        joined with space.

        """
        byte = self._readbyte()
        if byte is None:
            raise FormatError('unexpected end of input after P7')
        if byte != 10:
            raise FormatError('expected newline after P7')

        height = width = depth = maxval = None
        tupltype: str | None = None
        while True:
            line = self.read_line()
            if not line:
                raise FormatError('unexpected end of input in PAM header')
            if line[:1] == b'#':
                continue
            if not line.isascii():
                raise FormatError('non-ASCII character in PAM header')
            fields = line.decode('ascii').split(None, 1)
            identifier = fields[0] if fields else ''
            rest = fields[1].strip() if len(fields) > 1 else ''
            if identifier == 'ENDHDR':
                break
            if identifier == 'HEIGHT':
                height = _pam_value(height, identifier, rest)
            elif identifier == 'WIDTH':
                width = _pam_value(width, identifier, rest)
            elif identifier == 'DEPTH':
                depth = _pam_value(depth, identifier, rest)
            elif identifier == 'MAXVAL':
                maxval = _pam_value(maxval, identifier, rest)
            elif identifier == 'TUPLTYPE':
                tupltype = rest if tupltype is None else f'{tupltype} {rest}'
            else:
                raise FormatError(f'Unknown header line {identifier!r}')

        if height is None:
            raise FormatError('Expected one HEIGHT line')
        if width is None:
            raise FormatError('Expected one WIDTH line')
        if depth is None:
            raise FormatError('Expected one DEPTH line')
        if maxval is None:
            raise FormatError('Expected one MAXVAL line')
        if maxval == 0:
            log_warning('non-compliant maxval 0')
        return ArbitraryHeader(height, width, depth, maxval, tupltype)

    def read_magic(self) -> bytes:
        """Return two bytes of magic number."""
        magic = bytearray()
        for _ in range(2):
            byte = self._readbyte()
            if byte is None:
                raise TruncatedInputError(
                    f'expected 2 bytes of magic number, got {bytes(magic)!r}'
                )
            magic.append(byte)
        return bytes(magic)

    def read_token(self) -> bytes:
        """Return next whitespace delimited token.

        The whitespace byte terminating the token is consumed.

        """
        token = bytearray()
        for byte in self._uncommented():
            if byte in WHITESPACE:
                if token:
                    break
            else:
                token.append(byte)
        if not token:
            raise FormatError('unexpected end of input')
        if not token.isascii():
            raise FormatError(f'non-ASCII character in token {bytes(token)!r}')
        return bytes(token)

    def read_uint(self) -> int:
        """Return next token as unsigned 32-bit integer."""
        return parse_uint(self.read_token())

    def read_line(self) -> bytes:
        """Return bytes up to and including next newline or end of stream.

        The remainder of lines starting with '#' is skipped.

        """
        line = bytearray()
        while True:
            byte = self._readbyte()
            if byte is None:
                break
            if byte == 10 or line[:1] != b'#':
                line.append(byte)
            if byte == 10:
                break
        return bytes(line)

    def read_exact(self, size: int, /) -> bytes:
        """Return exactly size bytes from stream."""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._fh.read(min(remaining, CHUNKSIZE))
            if not chunk:
                raise TruncatedInputError(
                    f'expected {size} bytes of image data, '
                    f'got {size - remaining}'
                )
            chunks.append(chunk)
            remaining -= len(chunk)
        return b''.join(chunks)

    def _uncommented(self) -> Iterator[int]:
        """Yield bytes outside of comments.

        Line terminators ending comments are yielded.

        """
        while True:
            byte = self._readbyte()
            if byte is None:
                return
            if self._comment:
                if byte == 10 or byte == 13:
                    self._comment = False
                    yield byte
            elif byte == 35:
                self._comment = True
            else:
                yield byte

    def _readbyte(self) -> int | None:
        """Return next byte from stream or None at end of stream."""
        byte = self._fh.read(1)
        if not byte:
            return None
        return byte[0]


class PnmDecoder:
    """Decode PNM image from binary stream.

    The header is parsed when the instance is created. Image samples are
    decoded from the remainder of the stream on request.

    Parameters:
        file:
            Name of file or open binary stream to read.
            The stream does not need to be seekable.

    Raises:
        TruncatedInputError:
            Stream is too short to contain magic number.
        FormatError:
            Stream does not contain valid PNM header.
        UnsupportedColorError:
            PAM image has alpha channel.

    """

    header: PnmHeader
    """Parsed header of image."""

    tupletype: TupleType
    """Tuple type used to decode samples."""

    filename: str
    """File name."""

    _fh: BinaryIO | None
    _reader: PnmReader | None
    _decoded: bool

    TUPLTYPE: dict[str, str] = {
        'BITMAP': 'BLACKANDWHITE',
        'GRAYMAP': 'GRAYSCALE',
        'PIXMAP': 'RGB',
    }

    def __init__(self, file: PathLike | BinaryIO, /) -> None:
        self.filename = ''
        self._fh = None
        self._reader = None
        self._decoded = False

        if isinstance(file, (str, os.PathLike)):
            self._fh = open(file, 'rb')
            self.filename = os.fspath(file)
        else:
            self._fh = file

        try:
            self._reader = PnmReader(self._fh)
            self.header = self._reader.read_header()
            self.tupletype = tuple_type(self.header.record)
        except Exception:
            self.close()
            raise

    def dimensions(self) -> tuple[int, int]:
        """Return width and height of image."""
        return self.header.width, self.header.height

    def colortype(self) -> str:
        """Return color type of decoded image.

        One of GRAY1, GRAY8, GRAY16, RGB8, or RGB16.

        """
        return self.tupletype.colortype

    def decode(self) -> numpy.ndarray:
        """Return flat array of image samples decoded from stream.

        Samples are row-major and component-interleaved.
        The image can be decoded only once.

        """
        if self._reader is None:
            raise RuntimeError('stream was released or closed')
        if self._decoded:
            raise RuntimeError('image was already decoded')
        self._decoded = True
        return read_samples(self._reader, self.header, self.tupletype)

    def decode_row(self, buffer: bytearray, /) -> None:
        """Decode single row of image. Not supported."""
        raise NotImplementedError('decoding single rows is not supported')

    def asarray(self) -> numpy.ndarray:
        """Return image samples of shape (height, width[, 3])."""
        return self.decode().reshape(self.shape)

    def release(self) -> tuple[BinaryIO, PnmHeader]:
        """Return stream and parsed header. Detach stream from instance.

        The stream is positioned after the last byte of image data if the
        image was decoded, else after the header.

        """
        if self._fh is None:
            raise RuntimeError('stream was released or closed')
        fh = self._fh
        self._fh = None
        self._reader = None
        self.filename = ''
        return fh, self.header

    def close(self) -> None:
        """Close file opened by name."""
        if self.filename and self._fh is not None:
            self._fh.close()
        self._fh = None
        self._reader = None

    @property
    def magicnumber(self) -> MagicNumber:
        """ID determining PNM subtype."""
        return self.header.magicnumber

    @property
    def width(self) -> int:
        """Number of columns in image."""
        return self.header.width

    @property
    def height(self) -> int:
        """Number of rows in image."""
        return self.header.height

    @property
    def depth(self) -> int:
        """Number of samples per pixel."""
        return self.tupletype.components

    @property
    def maxval(self) -> int:
        """Maximum value of image samples."""
        record = self.header.record
        if isinstance(record, BitmapHeader):
            return 1
        if isinstance(record, GraymapHeader):
            return record.maxwhite
        return record.maxval

    @property
    def tupltype(self) -> str:
        """Kind of PAM image."""
        record = self.header.record
        if isinstance(record, ArbitraryHeader):
            return record.tupltype or ''
        return PnmDecoder.TUPLTYPE[self.header.subtype]

    @property
    def dtype(self) -> numpy.dtype:
        """Data type of image samples."""
        return numpy.dtype(self.tupletype.dtype)

    @property
    def shape(self) -> tuple[int, ...]:
        """Shape of image array."""
        if self.depth > 1:
            return self.height, self.width, self.depth
        return self.height, self.width

    @property
    def axes(self) -> str:
        """Axes of image array."""
        return 'YXS' if self.depth > 1 else 'YX'

    def __enter__(self) -> PnmDecoder:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self) -> str:
        if self.filename:
            arg = f'{os.path.split(os.path.normcase(self.filename))[-1]!r}'
        elif self._fh is not None:
            arg = str(type(self._fh).__name__)
        else:
            arg = ''
        return f'<{self.__class__.__name__}({arg})>'

    def __str__(self) -> str:
        return indent(
            repr(self),
            f'magicnumber: {self.magicnumber}',
            f'tupltype: {self.tupltype}',
            f'axes: {self.axes}',
            f'shape: {self.shape}',
            f'dtype: {self.dtype}',
            f'maxval: {self.maxval}',
            f'colortype: {self.colortype()}',
        )


def parse_uint(token: bytes | str, /, name: str = 'number') -> int:
    """Return unsigned 32-bit integer from decimal token."""
    if not token.isascii() or not token.isdigit():
        raise FormatError(f'invalid {name} {token!r}')
    value = int(token)
    if value > 0xFFFFFFFF:
        raise FormatError(f'invalid {name} {token!r}')
    return value


def _pam_value(current: int | None, key: str, value: str, /) -> int:
    """Return value of PAM header line that must occur only once."""
    if current is not None:
        raise FormatError(f'Duplicate {key} line')
    return parse_uint(value, key)


def indent(*args) -> str:
    """Return joined string representations of objects with indented lines."""
    text = '\n'.join(str(arg) for arg in args)
    return '\n'.join(
        ('  ' + line if line else line) for line in text.splitlines() if line
    )[2:]


def log_warning(msg, *args, **kwargs):
    """Log message with level WARNING."""
    import logging

    logging.getLogger('pnmdecoder').warning(msg, *args, **kwargs)
