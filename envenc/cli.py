"""
envenc command line
===================
    envenc keygen [--key-file PATH]
    envenc set NAME VALUE
    envenc import FILE
    envenc show
    envenc get NAME

Key material comes from --password (derived), then the key file, then
the cached {LABEL}_KEY / {LABEL}_NONCE environment variables.
"""

import argparse
import logging
import sys

from . import __version__, bridge, keys
from .config import Settings, load_settings_file
from .errors import EnvEncError
from .secret_env import SecretEnv
from .store import EncryptedStore
from .suites import CipherSuite

logger = logging.getLogger("envenc")

EXIT_OK, EXIT_ERROR, EXIT_USAGE = 0, 1, 2


class NoKeyMaterial(Exception):
    pass


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="envenc",
        description="Encrypt configuration values into a .env-style store.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--store", default=settings.store,
                   help=f"Encrypted store file (default: {settings.store})")
    p.add_argument("--cipher", default=settings.cipher.label,
                   help="CHACHA20POLY1305 or AES256GCM "
                        f"(default: {settings.cipher.label})")
    p.add_argument("--key-file", default=settings.key_file,
                   help="Plaintext key/nonce file. INSECURE, for demos only.")
    p.add_argument("--password",
                   help="Derive key and nonce from a password (deterministic, weak).")
    p.add_argument("--config", help="dotenv file with ENVENC_* settings")
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("-q", "--quiet", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("keygen", help="Generate key material")

    s = sub.add_parser("set", help="Encrypt one value into the store")
    s.add_argument("name")
    s.add_argument("value")

    i = sub.add_parser("import", help="Encrypt every value of a plaintext dotenv file")
    i.add_argument("source")

    sub.add_parser("show", help="Decrypt the store and print NAME=value lines")

    g = sub.add_parser("get", help="Decrypt the store and print one value")
    g.add_argument("name")
    return p


def resolve_material(args, suite: CipherSuite) -> keys.KeyMaterial:
    if args.password:
        return keys.derive(suite, args.password)
    if args.key_file:
        material = keys.KeyFile(args.key_file).load(suite)
        if material is not None:
            return material
    material = keys.from_env(suite)
    if material is None:
        raise NoKeyMaterial(
            f"No key material: pass --password or --key-file, or export "
            f"{suite.key_var} and {suite.nonce_var} (see 'envenc keygen').")
    return material


def cmd_keygen(args, suite: CipherSuite) -> int:
    if args.key_file:
        keys.KeyFile(args.key_file).load_or_generate(suite)
        print(f"Key material for {suite} in {args.key_file}")
        return EXIT_OK
    material = keys.generate(suite)
    print(f"export {suite.key_var}={material.key_hex}")
    print(f"export {suite.nonce_var}={material.nonce_hex}")
    return EXIT_OK


def run(args, suite: CipherSuite) -> int:
    if args.command == "keygen":
        return cmd_keygen(args, suite)

    env = SecretEnv(suite, resolve_material(args, suite), EncryptedStore(args.store))

    if args.command == "set":
        env.set(args.name, args.value)
    elif args.command == "import":
        env.import_dotenv(args.source)
    elif args.command == "show":
        for name, value in sorted(env.load().items()):
            print(f"{name}={value}")
    elif args.command == "get":
        entries = env.store.load_encrypted()
        if args.name not in entries:
            print(f"{args.name} not found", file=sys.stderr)
            return EXIT_ERROR
        print(bridge.decrypt_value(args.name, entries[args.name], suite, env.material.key))
    return EXIT_OK


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    # --config has to be applied before defaults are read
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    if known.config:
        load_settings_file(known.config)

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"envenc: {exc}", file=sys.stderr)
        return EXIT_USAGE

    args = build_parser(settings).parse_args(argv)

    level = settings.log_level
    if args.verbose:
        level = "DEBUG"
    elif args.quiet:
        level = "WARNING"
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        suite = CipherSuite.from_name(args.cipher)
    except ValueError as exc:
        print(f"envenc: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        return run(args, suite)
    except NoKeyMaterial as exc:
        print(f"envenc: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except EnvEncError as exc:
        logger.debug("command failed", exc_info=True)
        print(f"envenc: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
