"""Example: solve the BKL construction in both precisions and compare."""

from isotri import SolveOptions, construct, format_points, format_report, solve


def main() -> None:
    for precision in ("extended", "double"):
        result = solve(SolveOptions(precision=precision))
        print(f"[{precision}] converged={result.converged}")
        print(format_report(result), end="")
        print(format_points(construct(result.slope), digits=6))


if __name__ == "__main__":
    main()
