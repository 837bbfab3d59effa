"""
Magic-byte signature table.

Exported for the classifier:
  * HEADER_SIGNATURES : signatures anchored at a fixed offset near byte 0
  * SYNC_SIGNATURES   : M2TS and TS sync-byte grids, one entry per start
  * SCAN_SIGNATURES   : MXF and PS start codes, one entry per offset in SCAN_WINDOW
  * SIGNATURES        : the three groups in that order, first match wins
  * MIN_REQUIRED_LEN  : bytes needed to evaluate every entry

Priority:
  1. Header signatures, sorted by non-increasing span (the number of
     leading bytes an entry needs); ties keep the order written below.
  2. Sync grids, every M2TS start before any TS start, each by
     ascending start. A run of 0x47 bytes satisfies both and resolves
     to M2TS.
  3. Scanned start codes by ascending offset, MXF before PS at the
     same offset, so the earliest code in the prefix decides.

A fixed header always beats a pattern found further into the prefix.

References:
  https://en.wikipedia.org/wiki/List_of_file_signatures
  https://www.garykessler.net/library/file_sigs.html
"""
from media_infer.base import ContainerType, SignatureEntry


# ── MPEG transport streams ──
TS_SYNC_BYTE = b"\x47"
TS_PACKET_SIZE = 188
# BDAV (M2TS) prefixes every TS packet with a 4-byte arrival timestamp
M2TS_PACKET_SIZE = 192
M2TS_HEADER_SIZE = 4
SYNC_BYTES_TO_CHECK = 8


def _sync_grid(container, first, stride):
    """Sync byte at `first`, then every `stride` bytes."""
    return SignatureEntry(container, first, TS_SYNC_BYTE, extra=tuple(
        (first + i * stride, TS_SYNC_BYTE)
        for i in range(1, SYNC_BYTES_TO_CHECK)
    ))


# ── ISO base media ──
MP4_FTYP = b"ftyp"
MP4_BRANDS = (
    b"isom", b"iso2", b"iso4", b"iso5", b"iso6",
    b"mp41", b"mp42", b"avc1", b"MSNV",
    b"M4V ", b"M4A ", b"dash",
)

# ── scanned start codes ──
# Start offsets 0 .. SCAN_WINDOW - 1 are tried
SCAN_WINDOW = 2048
# SMPTE 377 header partition pack key, may follow a run-in
MXF_PARTITION_KEY = b"\x06\x0e\x2b\x34\x02\x05\x01\x01\x0d\x01\x02\x01\x01\x02"
PS_PACK_START_CODE = b"\x00\x00\x01\xba"


HEADER_SIGNATURES = (
    # First 4 bytes are the ftyp box size
    *(SignatureEntry(ContainerType.MP4, 4, MP4_FTYP + brand) for brand in MP4_BRANDS),

    # Magic, then creating program and version, then 3 reserved zero bytes at 8
    SignatureEntry(ContainerType.RCWT, 0, b"\xcc\xcc\xed",
                   extra=((8, b"\x00\x00\x00"),)),

    SignatureEntry(ContainerType.GXF, 0, b"\x00\x00\x00\x00\x01\xbc"),

    # Leading bytes of the ASF Header Object GUID
    SignatureEntry(ContainerType.ASF, 0, b"\x30\x26\xb2\x75"),
    # EBML header, or a stream that starts straight at the Segment element
    SignatureEntry(ContainerType.MKV, 0, b"\x1a\x45\xdf\xa3"),
    SignatureEntry(ContainerType.MKV, 0, b"\x18\x53\x80\x67"),
    SignatureEntry(ContainerType.WTV, 0, b"\xb7\xd8\x00\x20"),
    SignatureEntry(ContainerType.TIVO_PS, 0, b"TiVo"),
    # Video sequence header start code
    SignatureEntry(ContainerType.ES, 0, b"\x00\x00\x01\xb3"),
)

SYNC_SIGNATURES = (
    *(_sync_grid(ContainerType.M2TS, M2TS_HEADER_SIZE + start, M2TS_PACKET_SIZE)
      for start in range(M2TS_PACKET_SIZE)),
    *(_sync_grid(ContainerType.TS, start, TS_PACKET_SIZE)
      for start in range(TS_PACKET_SIZE)),
)

SCAN_SIGNATURES = tuple(
    SignatureEntry(container, offset, pattern)
    for offset in range(SCAN_WINDOW)
    for container, pattern in (
        (ContainerType.MXF, MXF_PARTITION_KEY),
        (ContainerType.PS, PS_PACK_START_CODE),
    )
)

SIGNATURES = HEADER_SIGNATURES + SYNC_SIGNATURES + SCAN_SIGNATURES

MIN_REQUIRED_LEN = max(entry.span for entry in SIGNATURES)
