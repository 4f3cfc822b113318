"""Token compression and encoding.

This module compresses a token string with gzip and writes it as unpadded
base64url text, a common shape for opaque access tokens.
"""

import gzip

from lb64 import URL_SAFE, Base64Value


class TokenEncoder:
    """Token encoder that compresses and encodes tokens.

    Encoding:
    1. Convert the input string to UTF-8 bytes
    2. Compress with gzip at maximum compression level (9)
    3. Encode with the unpadded URL-safe alphabet

    Decoding reverses this process.
    """

    def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string without padding.
        """
        compressed_token = gzip.compress(object.encode("utf-8"), compresslevel=9)
        return Base64Value.new_encode_bytes(compressed_token, URL_SAFE).as_str()

    def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            DecodeError: If the token is not valid base64url text.
            gzip.BadGzipFile: If the token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        compressed_token = Base64Value.from_string(raw_token, URL_SAFE).decode_to_bytes()
        return gzip.decompress(compressed_token).decode("utf-8")


def main() -> str:
    encoder = TokenEncoder()
    token = encoder.encode('{"permissionsByRole": {"admin": ["read", "write"]}}')
    print(token)
    original = encoder.decode(token)
    print(original)
    return original


if __name__ == "__main__":
    main()
