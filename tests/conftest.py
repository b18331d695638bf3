import sys
from pathlib import Path

import pytest

# Make the src/ layout importable when pytest runs from a plain checkout
SRC_ROOT = Path(__file__).resolve().parent.parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Enciphered with key "fdn"
SAMPLE_CIPHERTEXT = (
    "Nw vx lzureyday dg ykvx vgfjr yr vswetghhh gmh atwvtq bk vhrpnylij dai ibwpnylij dfxhfxprswf. Ykr krerhe nv ns ‘dfxhfxprsw bk orfuanqt’ fqq ykr qdgyhe nv ‘nxvrxvzjqg kre qhnwqvsj’, jmlpm fnuwhwh gmh inwnq gvkirwhahh vs ihsfgnra. Ykr krerhe zvhfoyd wnphf uonhh ny wuj hai rs f fbzufj rs xwhib nsg vy lf rdvsol hrahheshq blgm ‘vhrpvsj hu’ zufw ufv ojha qhnwqri inhwf, uuvsfvuorx dai jrshefovxdgnrax, dcuovhdgnrax dai vxnoyx"
)

SAMPLE_PLAINTEXT = (
    "it is important at this stage to introduce the notion of summative and formative assessments. the former is an ‘assessment of learning’ and the latter is ‘assessment for learning’, which capture the vital difference in function. the former usually takes place at the end of a course of study and it is mainly concerned with ‘summing up’ what has been learned facts, principles and generalisations, applications and skills"
)


@pytest.fixture
def sample_ciphertext():
    return SAMPLE_CIPHERTEXT


@pytest.fixture
def sample_plaintext():
    return SAMPLE_PLAINTEXT
