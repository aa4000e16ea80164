import argparse
import logging
import sys

from simulator.assumptions import MarketAssumptions
from simulator.input_parser import InputParser
from simulator.report_generator import ReportGenerator
from simulator.session_context import ComparisonSession
from simulator.simulation_engine import SimulationEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare two asset allocations and project their long-run wealth."
    )
    parser.add_argument("--current", default="100/0/0/0",
                        help="Current allocation as cash/etf/re/active (e.g. '100/0/0/0')")
    parser.add_argument("--target", default="100/0/0/0",
                        help="Target allocation as cash/etf/re/active (e.g. '20/40/25/15')")
    parser.add_argument("--edit", action="append", default=[],
                        help="Slider edit applied after the allocations, e.g. 'target:cash=30' "
                             "(repeatable, applied in order)")
    parser.add_argument("--initial", default="1,000,000", help="Initial capital (e.g. '1m', '100wan')")
    parser.add_argument("--monthly", default="20,000", help="Monthly contribution (e.g. '20k')")
    parser.add_argument("--price-old", help="Price of an item ten years ago (inflation estimate)")
    parser.add_argument("--price-now", help="Price of the same item today (inflation estimate)")
    parser.add_argument("--assumptions", help="JSON file overriding the rate / risk / probability tables")
    parser.add_argument("--interactive", action="store_true",
                        help="Keep reading slider edits from stdin after the first report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_session(args: argparse.Namespace, parser: InputParser, assumptions) -> ComparisonSession:
    session = ComparisonSession(inflation_rate=assumptions.inflation_rate)
    session.current = parser.parse_allocation(args.current)
    session.target = parser.parse_allocation(args.target)
    session.set_capital(parser.parse_amount(args.initial))
    session.set_contribution(parser.parse_amount(args.monthly))

    if args.price_old or args.price_now:
        if not (args.price_old and args.price_now):
            raise ValueError("Both --price-old and --price-now are needed to estimate inflation.")
        session.update_inflation(parser.parse_price(args.price_old), parser.parse_price(args.price_now))

    for text in args.edit:
        slot, asset, value = parser.parse_edit(text)
        session.edit(slot, asset, value)
    return session


def interactive_loop(session: ComparisonSession, engine: SimulationEngine, parser: InputParser):
    print("\nEnter edits like 'target:cash=30'. Type 'exit' to quit.")
    while True:
        user_input = input("\nEdit: ").strip()
        if user_input.lower() in ("exit", "quit", "q"):
            break
        if not user_input:
            continue
        try:
            slot, asset, value = parser.parse_edit(user_input)
        except ValueError as exc:
            print(f"⚠️  {exc}")
            continue
        session.edit(slot, asset, value)
        print(ReportGenerator.format_for_cli(ReportGenerator.render(engine.run(session))))


def main(argv=None):
    cli = build_parser()
    args = cli.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = InputParser()
    try:
        assumptions = (
            MarketAssumptions.load(args.assumptions) if args.assumptions else MarketAssumptions()
        )
        session = build_session(args, parser, assumptions)
    except (ValueError, FileNotFoundError) as exc:
        cli.error(str(exc))

    engine = SimulationEngine(assumptions)
    print(ReportGenerator.format_for_cli(ReportGenerator.render(engine.run(session))))

    if args.interactive:
        interactive_loop(session, engine, parser)
    return 0


if __name__ == "__main__":
    sys.exit(main())
