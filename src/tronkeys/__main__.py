"""
tronkeys cli
"""
import argparse
import json
import os
import sys
from getpass import getpass

import tronkeys
from tronkeys import __version__
from tronkeys import address
from tronkeys import wallet
from tronkeys.bips import bip39
from tronkeys.bips import bip44
from tronkeys.config import Config
from tronkeys.config import DEFAULT_CONFIG_DIR
from tronkeys.ecmath import CURVES
from tronkeys.ecmath import get_curve
from tronkeys.exceptions import TronKeysError


class RawDescriptionDefaultsHelpFormatter(
    argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter
):
    pass


class ExplicitOption(argparse.Action):
    """
    Custom Action used for checking whether an option has been set explicitly
    (rather than by default)
    """

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        setattr(namespace, self.dest + "__explicit", True)


def uint32(value: str) -> int:
    i = int(value)
    if i < 0 or i > 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"not in range [0, 2**32 - 1]: {value}")
    return i


def add_common_arguments(parser: argparse.ArgumentParser, include_curve: bool = True):
    parser.add_argument(
        "--config-dir",
        type=str,
        action=ExplicitOption,
        help="Directory to look for optional config file (config.toml or config.json). "
        + "TOML will take precedence over JSON if both files are defined, "
        + "but TOML is only available for python 3.11+ ",
        default=DEFAULT_CONFIG_DIR,
    )
    parser.add_argument(
        "-L",
        "--log-level",
        default="error",
        action=ExplicitOption,
        metavar="LOG_LEVEL",
        choices=["trace", "debug", "info", "warning", "error"],
        help="log level, e.g. 'trace', 'debug', 'info', 'warning', or 'error'",
    )
    if include_curve:
        parser.add_argument(
            "--curve",
            default="secp256k1",
            action=ExplicitOption,
            metavar="CURVE",
            choices=sorted(CURVES),
            help="elliptic curve used for key derivation and address encoding",
        )


def add_input_arguments(
    parser: argparse.ArgumentParser, in_file_help: str = "input data file"
):
    parser.add_argument(
        "--in-file",
        "-in",
        "-i",
        default="-",
        type=argparse.FileType("r"),
        help=in_file_help,
    )


def add_output_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--out-file",
        "-out",
        "-o",
        default="-",
        type=argparse.FileType("w"),
        help="output data file",
    )
    parser.add_argument(
        "-0",
        "--output-format",
        metavar="OUTPUT_FORMAT",
        default="text",
        action=ExplicitOption,
        choices=["text", "json"],
        help="'text' or 'json'",
    )


def read_mnemonic(file_) -> str:
    mnemonic = file_.read()
    # sanitize mnemonic to remove extra whitespace between words
    return " ".join(mnemonic.split())


def setup_parser() -> argparse.ArgumentParser:
    """
    Setup argument parser
    Returns:
        argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="tronkeys",
        description="""tronkeys derives TRON account keys and addresses from a mnemonic.

Use tronkeys <subcommand> -h for help on each command""",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
    )
    parser.add_argument("-v", "-V", "--version", action="version", version=__version__)
    sub_parser = parser.add_subparsers(dest="subcommand", metavar="[subcommand]")

    derive_parser = sub_parser.add_parser(
        "derive",
        help="Derive address(es) and private key(s) from mnemonic",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
        description=f"""
Derive TRON accounts at {bip44.derivation_path("<index>")}.

The mnemonic is read from --in-file (stdin by default). It is not validated 
against any wordlist.

Examples:

    1. Derive the first account

        $ echo <mnemonic-phrase> | tronkeys derive

    2. Derive accounts 10 through 14 as json

        $ echo <mnemonic-phrase> | tronkeys derive --index 10 --count 5 -0 json""",
    )
    derive_parser.add_argument(
        "--index", "-I", type=uint32, default=0, help="(first) address index"
    )
    derive_parser.add_argument(
        "--count", "-n", type=int, default=1, help="number of consecutive accounts"
    )
    add_common_arguments(derive_parser)
    add_input_arguments(derive_parser, in_file_help="mnemonic phrase file")
    add_output_arguments(derive_parser)

    addr_parser = sub_parser.add_parser(
        "address",
        help="Calculate address from private key",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
        description="""
Calculate TRON address from a hex encoded private key.

Example:

    $ echo <private-key-hex> | tronkeys address""",
    )
    add_common_arguments(addr_parser)
    add_input_arguments(addr_parser, in_file_help="hex private key file")
    add_output_arguments(addr_parser)

    decode_parser = sub_parser.add_parser(
        "decode",
        help="Decode address to hex",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
        description="""
Decode and verify a TRON address, printing its 41-prefixed hex form.""",
    )
    decode_parser.add_argument("address", help="base58 TRON address")
    add_common_arguments(decode_parser, include_curve=False)
    add_output_arguments(decode_parser)

    seed_parser = sub_parser.add_parser(
        "seed",
        help="Convert mnemonic to seed",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
        description="""
Convert mnemonic to 64 byte seed (hex).

Use --passphrase to be prompted for a BIP39 passphrase.""",
    )
    seed_parser.add_argument(
        "--passphrase", "-p", action="store_true", help="prompt for passphrase"
    )
    add_common_arguments(seed_parser, include_curve=False)
    add_input_arguments(seed_parser, in_file_help="mnemonic phrase file")
    add_output_arguments(seed_parser)
    return parser


def write_output(data, out_file, output_format: str):
    if output_format == "json":
        out_file.write(json.dumps(data) + os.linesep)
        return
    if isinstance(data, dict):
        data = [data]
    if isinstance(data, list):
        for item in data:
            for key, value in item.items():
                out_file.write(f"{key}: {value}{os.linesep}")
    else:
        out_file.write(f"{data}{os.linesep}")


def main(argv=None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)
    if not args.subcommand:
        parser.print_help()
        return 0

    config = Config(**vars(args))
    config.load_config(config_dir=args.config_dir)
    explicit_options = {
        option: value
        for option, value in vars(args).items()
        if getattr(args, option + "__explicit", False)
    }
    config.update(**explicit_options)
    log = tronkeys.init_logging(config.log_level)

    try:
        if args.subcommand == "derive":
            curve = get_curve(config.curve)
            accounts = wallet.derive_addresses(
                read_mnemonic(args.in_file),
                start=args.index,
                count=args.count,
                curve=curve,
            )
            write_output(
                [
                    {"Index": index, "Address": addr, "PrivKey": privkey}
                    for index, addr, privkey in accounts
                ],
                args.out_file,
                config.output_format,
            )
        elif args.subcommand == "address":
            curve = get_curve(config.curve)
            privkey = bytes.fromhex(args.in_file.read().strip())
            addr = wallet.private_key_to_address(privkey, curve=curve)
            write_output(
                {"Address": addr} if config.output_format == "json" else addr,
                args.out_file,
                config.output_format,
            )
        elif args.subcommand == "decode":
            hex_address = address.to_hex_address(args.address)
            write_output(
                {"Address": args.address, "Hex": hex_address}
                if config.output_format == "json"
                else hex_address,
                args.out_file,
                config.output_format,
            )
        elif args.subcommand == "seed":
            passphrase = getpass(prompt="passphrase: ") if args.passphrase else ""
            seed = bip39.to_seed(read_mnemonic(args.in_file), passphrase=passphrase)
            write_output(
                {"Seed": seed.hex()} if config.output_format == "json" else seed.hex(),
                args.out_file,
                config.output_format,
            )
    except (TronKeysError, ValueError) as err:
        log.debug(f"{args.subcommand} failed", exc_info=True)
        sys.stderr.write(f"error: {err}{os.linesep}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
