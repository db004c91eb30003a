from weglot_i18n.translation import placeholders


def test_encode_replaces_placeholder_with_positional_marker():
    encoded, tokens = placeholders.encode_placeholders("Hi {{name}}")
    assert encoded == "Hi {{1}}"
    assert tokens == ["{{name}}"]


def test_encode_without_placeholders_returns_text_unchanged():
    assert placeholders.encode_placeholders("Hello world") == ("Hello world", [])


def test_encode_numbers_placeholders_in_order_of_appearance():
    encoded, tokens = placeholders.encode_placeholders("{{count}} new messages for {{user.name}}")
    assert encoded == "{{1}} new messages for {{2}}"
    assert tokens == ["{{count}}", "{{user.name}}"]


def test_encode_keeps_repeated_placeholders_as_separate_tokens():
    encoded, tokens = placeholders.encode_placeholders("{{a}} and {{a}}")
    assert encoded == "{{1}} and {{2}}"
    assert tokens == ["{{a}}", "{{a}}"]


def test_encode_is_non_greedy():
    encoded, tokens = placeholders.encode_placeholders("{{a}}b}} {{c}}")
    assert encoded == "{{1}}b}} {{2}}"
    assert tokens == ["{{a}}", "{{c}}"]


def test_encode_does_not_confuse_numeric_placeholders_with_markers():
    encoded, tokens = placeholders.encode_placeholders("{{b}} {{1}}")
    assert encoded == "{{1}} {{2}}"
    assert tokens == ["{{b}}", "{{1}}"]


def test_decode_restores_placeholder_in_translated_text():
    assert placeholders.decode_placeholders("Salut {{1}}", ["{{name}}"]) == "Salut {{name}}"


def test_decode_follows_markers_when_provider_reorders_them():
    result = placeholders.decode_placeholders("{{2}} avant {{1}}", ["{{first}}", "{{second}}"])
    assert result == "{{second}} avant {{first}}"


def test_decode_skips_dropped_markers():
    assert placeholders.decode_placeholders("Bonjour", ["{{name}}"]) == "Bonjour"


def test_decode_leaves_extra_markers_untouched():
    assert placeholders.decode_placeholders("A {{1}} {{3}}", ["{{n}}"]) == "A {{n}} {{3}}"


def test_decode_replaces_only_first_occurrence_of_a_marker():
    assert placeholders.decode_placeholders("{{1}} {{1}}", ["{{n}}"]) == "{{n}} {{1}}"


def test_decode_without_tokens_is_a_no_op():
    assert placeholders.decode_placeholders("Hola {{1}}", []) == "Hola {{1}}"


def test_round_trip_restores_original_when_markers_are_kept():
    for text in [
        "Plain text",
        "Hi {{name}}",
        "{{count}} items in {{cart}}",
        "{{a}}{{b}}{{a}}",
        "Hello {{1}}",
        "{{b}} {{1}}",
        "{{2}} of {{1}}",
    ]:
        encoded, tokens = placeholders.encode_placeholders(text)
        assert placeholders.decode_placeholders(encoded, tokens) == text


def test_restore_from_original_uses_original_placeholder_positions():
    assert placeholders.restore_from_original("Hi {{name}}", "Salut {{1}}") == "Salut {{name}}"


def test_extract_placeholders_lists_every_occurrence():
    assert placeholders.extract_placeholders("{{x}} {{y}} {{x}}") == ["{{x}}", "{{y}}", "{{x}}"]


def test_decode_does_not_rewrite_restored_numeric_placeholders():
    encoded, tokens = placeholders.encode_placeholders("{{2}} of {{1}}")
    assert encoded == "{{1}} of {{2}}"
    assert placeholders.decode_placeholders("Page {{1}} sur {{2}}", tokens) == "Page {{2}} sur {{1}}"


def test_decode_ignores_zero_padded_markers():
    assert placeholders.decode_placeholders("{{01}} {{1}}", ["{{n}}"]) == "{{01}} {{n}}"
