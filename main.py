from rich.pretty import pprint

from lexonaut import *

__prog__ = "lexonaut-demo"
__docs__ = {
    FaultCode.UNTERMINATED_QUOTE: "quoted text runs to the end of the input",
}

QUOTES = [('"', '"'), ("“", "”")]


def command(text):
    return 1 if text.startswith("!") else None


if __name__ == '__main__':
    if (found := Lexer('!hello world "cool stuff" --foo --bar=baz -v a b c', quotes=QUOTES).lex_command(command)):
        name, rest = found
        strategy = merge_strategies(
            matching_strategy({"verbose": ["-v"]}, {}),
            long_strategy(),
        )
        args = Args(Parser(rest()).set_unordered_strategy(strategy).parse())
        pprint(name)
        pprint(args.output)
        pprint({
            "first": args.single(),
            "verbose": args.flag("verbose"),
            "bar": args.option("bar"),
            "rest": args.many(),
        })
