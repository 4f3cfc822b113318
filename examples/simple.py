"""Encode and decode a paragraph of text with the MIME configuration."""

from lb64 import MIME, Base64Value

LYRICS = """Somebody once told me the world is gonna roll me
I ain't the sharpest tool in the shed
She was looking kind of dumb with her finger and her thumb
In the shape of an "L" on her forehead"""


def main() -> str:
    value = Base64Value.new_encode_bytes(LYRICS.encode("utf-8"), MIME)
    print(value)

    decoded = value.decode_to_bytes().decode("utf-8")
    print(decoded)
    return decoded


if __name__ == "__main__":
    main()
