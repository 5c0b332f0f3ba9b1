import pytest


@pytest.fixture
def sample_fasta(tmp_path):
    """FASTA with a balanced, an all-GC, an ambiguous-only and an invalid record."""
    path = tmp_path / "sample.fasta"
    path.write_text(
        "\n".join(
            [
                ">rec1 balanced",
                "ATCG",
                "ATCG",
                ">rec2 gc rich",
                "gcgcgc",
                ">rec3 ambiguous",
                "NNNN",
                ">rec4 invalid",
                "ACGTXZ",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
