import sys
from typing import List

from . import Option, OptionType, ResultType, parse, print_error, print_usage


def example_options() -> List[Option]:
    return [
        Option(OptionType.FLAG, "h", "help", False,
               "print this help message and exit"),
        Option(OptionType.BOOL, "b", "bool", False,
               "(optionally) takes a boolean arg!"),
        Option(OptionType.INT, None, "int", True,
               "requires an integer. has no short_name!"),
        Option(OptionType.UNSIGNED, "u", "uns", True,
               "this one has a custom_arg_label. normally it would say "
               "\"UNSIGNED\" rather than \"NON-NEG-INT\"",
               "NON-NEG-INT"),
        Option(OptionType.DOUBLE, "d", "double", True,
               "a floating point number"),
        Option(OptionType.STRING, "s", None, True,
               "this one doesn't have a long_name version"),
        Option(OptionType.STRING_SET, None, "set-choice", True,
               "a choice of one string from a fixed list",
               "(str_a|str_b)", ["str_a", "str_b"]),
        Option.end(),
    ]


def describe(o: Option) -> str:
    if o.type is OptionType.BOOL:
        return "true" if o.val_bool else "false"
    if o.type is OptionType.INT:
        return str(o.val_int)
    if o.type is OptionType.UNSIGNED:
        return str(o.val_unsigned)
    if o.type is OptionType.DOUBLE:
        return f"{o.val_double:f}"
    if o.type is OptionType.CHAR:
        return o.val_char
    if o.type is OptionType.STRING:
        return o.val_string
    if o.type is OptionType.STRING_SET:
        return o.chosen
    return ""


def main(argv: List[str]) -> int:
    options = example_options()
    result = parse(argv, options)

    if result.result_type is not ResultType.SUCCESS:
        print_error(sys.stderr, argv[0], result)
        return 1

    if options[0].seen:
        print_usage(sys.stdout, 80, argv[0], "[OPTION]... [--] [NON-OPTION]...",
                    "This is where you would put an overview description of the "
                    "program and its general functionality.", options)
        return 0

    for o in options[:-1]:
        line = f"--{o.long_name}, " if o.long_name else f"-{o.short_name}, "
        line += f"seen: {'yes' if o.seen else 'no'}"
        if o.value_stored:
            line += f", val: {describe(o)}"
        print(line)

    if result.argv:
        print("\nnon-options: " + " ".join(result.argv))

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
