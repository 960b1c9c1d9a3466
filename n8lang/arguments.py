"""Command-line argument handling for the interpreter."""

from __future__ import annotations

from typing import Dict, Iterable, List


class ArgumentParser:
    """Recognises declared ``-short`` / ``--long`` flags and collects input files."""

    def __init__(self, argv: Iterable[str]) -> None:
        self.argv: List[str] = list(argv)
        self._parameters: Dict[str, str] = {}
        self._descriptions: Dict[str, str] = {}

    def define_parameter(self, short: str, long: str, description: str) -> None:
        """Declare a flag by its short and long names."""
        self._parameters[short] = long
        self._descriptions[short] = description
        self._descriptions[long] = description

    def describe(self) -> str:
        """Return the help text listing every declared flag."""
        lines = ["", "\u001b[32mArguments\u001b[0m: "]
        lines.extend(
            f"  -{short}, --{long}: {self._descriptions[short]}"
            for short, long in self._parameters.items()
        )
        return "\n".join(lines) + "\n"

    def has_parameter(self, short: str) -> bool:
        """Return True if the flag, in short or long form, was given.

        Raises KeyError if the flag was never declared.
        """
        try:
            long = self._parameters[short]
        except KeyError:
            raise KeyError(f"Undefined parameter: {short}") from None
        return any(arg in (f"-{short}", f"--{long}") for arg in self.argv)

    def program_file_name(self) -> str:
        """Return the name the program was started with."""
        return self.argv[0]

    def input_files(self) -> List[str]:
        """Return every argument after the program name that is not a declared flag."""
        long_names = set(self._parameters.values())
        files = []
        for arg in self.argv[1:]:
            if arg.startswith("--"):
                if arg[2:] in long_names:
                    continue
            elif arg.startswith("-"):
                if arg[1:] in self._parameters:
                    continue
            files.append(arg)
        return files