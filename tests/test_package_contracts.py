import rfcdoctool


def test_public_api_is_exported():
    for name in rfcdoctool.__all__:
        assert hasattr(rfcdoctool, name), name


def test_public_api_round_trip(sample_document):
    assert rfcdoctool.find_sections(sample_document)
    result = rfcdoctool.full_formatting_command(sample_document, "sample.rfc")
    assert result.success
    assert rfcdoctool.process_toc(result.result) == result.result
