"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from minilex.config import ScanConfig
from minilex.lexer import Scanner
from minilex.tokens import TokenKind

# Characters of the language plus a few it does not know
LANGUAGE_CHARS = " \t\nabefilnrtvwxyz019.+-*/^=<>!(){},;@#$_\"'"


class TestTermination:
    """Every finite input ends in a permanent EOF."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_single_eof(self, source: str) -> None:
        tokens = list(Scanner(source).tokenize())

        assert tokens[-1].type == TokenKind.EOF
        assert sum(1 for t in tokens if t.type == TokenKind.EOF) == 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_token_count_bounded_by_length(self, source: str) -> None:
        """Each non-EOF token consumes at least one character."""
        scanner = Scanner(source)
        produced = 0
        while scanner.next_token().type != TokenKind.EOF:
            produced += 1
            assert produced <= len(source)

    @given(st.text(max_size=200), st.integers(min_value=1, max_value=5))
    @settings(max_examples=50)
    def test_eof_is_idempotent(self, source: str, extra_calls: int) -> None:
        scanner = Scanner(source)
        list(scanner.tokenize())

        for _ in range(extra_calls):
            token = scanner.next_token()
            assert token.type == TokenKind.EOF
            assert token.value == ""
        assert scanner.at_end


class TestCoverage:
    """Lexemes and skipped runs rebuild the source exactly."""

    @given(st.text(alphabet=LANGUAGE_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_offsets_slice_back_to_lexemes(self, source: str) -> None:
        tokens = list(Scanner(source))

        previous_end = 0
        pieces: list[str] = []
        for token in tokens:
            assert token._start_offset >= previous_end
            assert source[token._start_offset : token._end_offset] == token.value
            assert token.value != ""
            pieces.append(source[previous_end : token._start_offset])
            pieces.append(token.value)
            previous_end = token._end_offset
        pieces.append(source[previous_end:])

        assert "".join(pieces) == source

    @given(st.text(alphabet=LANGUAGE_CHARS, max_size=300))
    @settings(max_examples=200)
    def test_whitespace_policy_only_skips_whitespace(self, source: str) -> None:
        config = ScanConfig(skip_policy="whitespace")
        tokens = list(Scanner(source, config=config))

        previous_end = 0
        for token in tokens:
            assert source[previous_end : token._start_offset].strip() == ""
            previous_end = token._end_offset
        assert source[previous_end:].strip() == ""

    @given(st.from_regex(r"[a-z0-9 \n]{1,100}", fullmatch=True))
    @settings(max_examples=50)
    def test_alphanumeric_input_has_no_gaps_but_spaces(self, source: str) -> None:
        combined = "".join(t.value for t in Scanner(source))
        assert combined == source.replace(" ", "").replace("\n", "")


class TestDeterminism:
    """Scanning is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_scans_identical(self, source: str) -> None:
        first = [(t.type, t.value, t._start_offset) for t in Scanner(source).tokenize()]
        second = [(t.type, t.value, t._start_offset) for t in Scanner(source).tokenize()]
        assert first == second

    @given(st.text(alphabet=LANGUAGE_CHARS, max_size=200))
    @settings(max_examples=50)
    def test_pull_and_iterator_agree(self, source: str) -> None:
        pulled = []
        scanner = Scanner(source)
        while (token := scanner.next_token()).type != TokenKind.EOF:
            pulled.append(token)

        assert pulled == list(Scanner(source))


class TestKindInvariants:
    """Token kinds agree with their lexemes."""

    @given(st.text(alphabet=LANGUAGE_CHARS, max_size=300))
    @settings(max_examples=100)
    def test_default_policy_never_reports_errors(self, source: str) -> None:
        assert all(t.type != TokenKind.ERROR for t in Scanner(source))

    @given(st.text(alphabet=LANGUAGE_CHARS, max_size=300))
    @settings(max_examples=100)
    def test_numbers_are_well_formed(self, source: str) -> None:
        for token in Scanner(source):
            if token.type == TokenKind.NUM:
                whole, _, fraction = token.value.partition(".")
                assert whole.isdigit()
                assert fraction == "" or fraction.isdigit()
                assert not token.value.endswith(".")
