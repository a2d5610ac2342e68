import pytest

from application.engine import LanguageFamilyEngine

HEADER = "ID,Name,ISO639P3code,Level,Parent_ID"

GERMANIC_CSV = f"""{HEADER}
eng1234,English,eng,language,germ1234
deu1234,German,deu,language,germ1234
germ1234,Germanic,,family,indo1234
indo1234,Indo-European,,family,
"""

WIDE_CSV = f"""{HEADER}
indo1234,Indo-European,,family,
germ1234,Germanic,,family,indo1234
west1234,West Germanic,,family,germ1234
nort1234,North Germanic,,family,germ1234
eng1234,English,eng,language,west1234
deu1234,German,deu,language,west1234
swe1234,Swedish,swe,language,nort1234
roma1234,Romance,,family,indo1234
spa1234,Spanish,spa,language,roma1234
slav1234,Slavic,,family,indo1234
hbs1234,Serbo-Croatian,hbs,language,slav1234
ural1234,Uralic,,family,
fin1234,Finnish,fin,language,ural1234
eus1234,Basque,eus,language,
"""

CONLANG_CSV = f"""{HEADER}
arti1234,Artificial Language,,family,
epo1234,Esperanto,epo,language,arti1234
"""


@pytest.fixture
def germanic_engine() -> LanguageFamilyEngine:
    return LanguageFamilyEngine.from_text(GERMANIC_CSV)


@pytest.fixture
def wide_engine() -> LanguageFamilyEngine:
    return LanguageFamilyEngine.from_text(WIDE_CSV, CONLANG_CSV)


@pytest.fixture
def germanic_csv() -> str:
    return GERMANIC_CSV


@pytest.fixture
def conlang_csv() -> str:
    return CONLANG_CSV
