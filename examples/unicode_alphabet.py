"""Encode bytes and an integer with a custom emoji alphabet.

Any 64 distinct printable characters make a valid alphabet, including ones
outside ASCII.
"""

from lb64 import AlphabetConfig, Base64Value, DecodeError

# U+1F600 .. U+1F63F, one emoticon per 6-bit value.
EMOJI = "".join(chr(0x1F600 + offset) for offset in range(64))


def main() -> int:
    config = AlphabetConfig.validate(EMOJI, padding_symbol="⋔", name="EMOJI")

    value = Base64Value.new_encode_bytes("Unicode Base64".encode("utf-8"), config)
    print(f"Encoded:\n{value}\n")
    print(f'Decoded: "{value.decode_to_bytes().decode("utf-8")}"\n')

    number = 10
    print(f"Number to encode: {number}")
    encoded = Base64Value.new_encode_unsigned(number, config)
    print(f"Unsigned encoded = {encoded}")
    try:
        decoded = encoded.decode_to_unsigned()
    except DecodeError as e:
        print(e)
        raise
    print(f"Unsigned decoded = {decoded}")
    return decoded


if __name__ == "__main__":
    main()
