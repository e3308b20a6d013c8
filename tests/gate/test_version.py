"""
Testes para comparação de versões semânticas.
"""
import itertools

import pytest

from manup.core.exceptions import MalformedError
from manup.services.gate.version import SemVer, compare_versions, parse_version


class TestParseVersion:
    """Testes para parse_version."""

    def test_parse_valida(self):
        """Deve converter em tripla de inteiros."""
        assert parse_version("2.3.4") == SemVer(2, 3, 4)

    def test_parse_ignora_espacos(self):
        """Espaços nas pontas são tolerados."""
        assert parse_version(" 1.0.0\n") == SemVer(1, 0, 0)

    def test_str(self):
        """SemVer volta para o formato texto."""
        assert str(SemVer(10, 0, 3)) == "10.0.3"

    @pytest.mark.parametrize("texto", [
        "1.2",
        "1.2.3.4",
        "1.x.3",
        "a.b.c",
        "",
        "-1.2.3",
        "1.2.3-beta",
        "1..3",
    ])
    def test_parse_malformada(self, texto):
        """Versão fora do formato é erro, nunca zero."""
        with pytest.raises(MalformedError):
            parse_version(texto)

    def test_parse_digitos_nao_ascii(self):
        """Só dígitos ASCII contam como número."""
        with pytest.raises(MalformedError):
            parse_version("\u0661.\u0662.\u0663")

    def test_parse_nao_string(self):
        """Tipos que não são string são rejeitados."""
        with pytest.raises(MalformedError):
            parse_version(123)


class TestCompareVersions:
    """Testes para compare_versions."""

    def test_maior(self):
        assert compare_versions("6.3.4", "4.3.4") > 0

    def test_menor(self):
        assert compare_versions("2.3.4", "4.3.4") < 0

    def test_igual(self):
        assert compare_versions("2.3.4", "2.3.4") == 0

    def test_numerico_nao_lexico(self):
        """"10" > "9" numericamente."""
        assert compare_versions("1.10.0", "1.9.0") > 0
        assert compare_versions("10.0.0", "9.9.9") > 0

    def test_ordem_dos_componentes(self):
        """MAJOR pesa mais que MINOR, que pesa mais que PATCH."""
        assert compare_versions("2.0.0", "1.99.99") > 0
        assert compare_versions("1.2.0", "1.1.99") > 0
        assert compare_versions("1.1.2", "1.1.1") > 0

    def test_malformada_propaga(self):
        with pytest.raises(MalformedError):
            compare_versions("2.3", "2.3.4")
        with pytest.raises(MalformedError):
            compare_versions("2.3.4", "x.y.z")


class TestOrdemTotal:
    """Propriedades de ordem total sobre uma amostra de versões."""

    VERSOES = ["0.0.0", "0.0.1", "0.1.0", "1.0.0", "1.0.10", "1.2.3", "1.10.0", "2.0.0", "10.0.0"]

    def test_reflexiva(self):
        for v in self.VERSOES:
            assert compare_versions(v, v) == 0

    def test_antissimetrica(self):
        for a, b in itertools.product(self.VERSOES, repeat=2):
            assert (compare_versions(a, b) > 0) == (compare_versions(b, a) < 0)

    def test_transitiva(self):
        for a, b, c in itertools.product(self.VERSOES, repeat=3):
            if compare_versions(a, b) < 0 and compare_versions(b, c) < 0:
                assert compare_versions(a, c) < 0

    def test_lista_ja_ordenada(self):
        """A amostra está em ordem crescente estrita."""
        for a, b in zip(self.VERSOES, self.VERSOES[1:]):
            assert compare_versions(a, b) < 0
