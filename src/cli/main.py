"""CLI — построчное RSA шифрование stdin → stdout.

Команды:
- e: шифрование текста, каждая строка → две строки шифротекста
- d: расшифрование чередующихся пар строк шифротекста

Ключ: --key-file PATH (JSON, контракт key_material) или переменные
окружения BIGNUM_RSA_N / BIGNUM_RSA_E / BIGNUM_RSA_D.

Коды возврата:
- 0: успех, а также отсутствие команды/входа и неизвестная команда
  (сообщение "Error: ..." в stdout)
- 1: ошибка ключа, контракта или арифметики
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import jsonschema
from pydantic import ValidationError

from src.cipher.chunking import LineCipher
from src.core.contracts import validate_encrypted_lines
from src.core.domain.key_material import KeyMaterial, load_key_material
from src.core.math.digit_arithmetic import BignumError

logger = logging.getLogger(__name__)

COMMAND_ENCRYPT = "e"
COMMAND_DECRYPT = "d"

FORMAT_LINES = "lines"
FORMAT_JSON = "json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum-rsa",
        description="Textbook RSA over digit-vector integers: encrypt (e) or decrypt (d) stdin.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="'e' to encrypt text, 'd' to decrypt pairs of ciphertext lines",
    )
    parser.add_argument(
        "-k",
        "--key-file",
        help="JSON key file with modulus, public_exponent, private_exponent "
        "(default: BIGNUM_RSA_N / BIGNUM_RSA_E / BIGNUM_RSA_D environment variables)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=(FORMAT_LINES, FORMAT_JSON),
        default=FORMAT_LINES,
        help="Ciphertext format: two lines per plaintext line, or a JSON list (default: lines)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def _load_key(key_file: Optional[str]) -> KeyMaterial:
    if key_file:
        return load_key_material(key_file)
    return KeyMaterial.from_env()


def _read_pairs(raw: str, fmt: str) -> list[tuple[str, str]]:
    """Пары шифротекстов из stdin; нечётная последняя строка отбрасывается."""
    if fmt == FORMAT_JSON:
        if not raw.strip():
            return []
        items = json.loads(raw)
        if not isinstance(items, list):
            raise jsonschema.ValidationError("expected a JSON list of encrypted lines")
        validate_encrypted_lines(items)
        return [(item["first"], item["second"]) for item in items]

    lines = raw.splitlines()
    return [(lines[i], lines[i + 1]) for i in range(0, len(lines) - 1, 2)]


def run_encrypt(cipher: LineCipher, text: str, fmt: str) -> None:
    encrypted = cipher.encrypt_text(text)

    if fmt == FORMAT_JSON:
        print(json.dumps([line.model_dump() for line in encrypted], indent=2))
        return

    for line in encrypted:
        print(line.first)
        print(line.second)


def run_decrypt(cipher: LineCipher, pairs: list[tuple[str, str]]) -> None:
    for first, second in pairs:
        print(cipher.decrypt_line(first, second))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        print("Error: No command provided")
        return 0

    if args.command not in (COMMAND_ENCRYPT, COMMAND_DECRYPT):
        print("Error: Unsupported command")
        return 0

    raw = sys.stdin.read()

    try:
        if args.command == COMMAND_ENCRYPT:
            if not raw:
                print("Error: No text to encrypt")
                return 0
            cipher = LineCipher(_load_key(args.key_file))
            run_encrypt(cipher, raw, args.format)
        else:
            pairs = _read_pairs(raw, args.format)
            if not pairs:
                print("Error: No values to decrypt")
                return 0
            cipher = LineCipher(_load_key(args.key_file))
            run_decrypt(cipher, pairs)
    except KeyError as e:
        print(f"Error: {e.args[0] if e.args else e}")
        return 1
    except (OSError, json.JSONDecodeError, UnicodeError) as e:
        print(f"Error: {e}")
        return 1
    except jsonschema.ValidationError as e:
        print(f"Error: invalid input: {e.message}")
        return 1
    except ValidationError as e:
        print(f"Error: invalid key material: {e.error_count()} validation error(s)")
        logger.debug("key material validation failed: %s", e)
        return 1
    except BignumError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
