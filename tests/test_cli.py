import io

import pytest

from pagesim.cli import INT_MAX, INT_MIN, main, read_int


def read(text):
    out = io.StringIO()
    value = read_int(io.StringIO(text), out)
    return value, out.getvalue()


def test_read_plain_integer():
    value, output = read("42\n")
    assert value == 42
    assert output == ""


def test_read_skips_invalid_lines():
    value, output = read("abc\n\n  -7\n")
    assert value == -7
    assert output.count("Entrada inválida. Por favor, insira um número inteiro: ") == 2


@pytest.mark.parametrize("line", ["5 \n", "12x\n", "+\n", "1.5\n"])
def test_read_rejects_trailing_garbage(line):
    value, output = read(line + "8\n")
    assert value == 8
    assert "Entrada inválida" in output


def test_read_accepts_sign_and_last_line_without_newline():
    assert read("+15")[0] == 15


def test_read_range_limits():
    assert read(f"{INT_MAX}\n")[0] == INT_MAX
    assert read(f"{INT_MIN}\n")[0] == INT_MIN
    value, output = read(f"{INT_MAX + 1}\n3\n")
    assert value == 3
    assert "Valor fora do intervalo permitido. Tente novamente: " in output


def test_read_end_of_input():
    with pytest.raises(EOFError):
        read_int(io.StringIO("nope\n"), io.StringIO())


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(["--seed", "1"])
    return code, capsys.readouterr().out


def test_main_quits(monkeypatch, capsys):
    code, output = run(monkeypatch, capsys, "4\n")
    assert code == 0
    assert "Simulador inicializado com sucesso." in output
    assert "Encerrando o simulador..." in output
    assert output.endswith("Recursos do simulador liberados.\n")


def test_main_creates_and_shows_process(monkeypatch, capsys):
    code, output = run(monkeypatch, capsys, "2\n1\n100\n3\n1\n1\n4\n")
    assert code == 0
    assert "Processo 1 criado com sucesso, ocupando 1 páginas." in output
    assert "--- Tabela de Páginas do Processo 1 ---" in output
    assert "Quadro 000: [ Ocupado por P1, Página 0 ]" in output
    assert "Quadro 001: [ Livre ]" in output


def test_main_reports_errors_and_continues(monkeypatch, capsys):
    code, output = run(monkeypatch, capsys, "2\n1\n0\n3\n9\n9\n4\n")
    assert code == 0
    assert "Erro: Tamanho do processo (0 bytes)" in output
    assert "Erro: Processo com PID 9 não encontrado." in output
    assert "Opção inválida. Por favor, tente novamente." in output


def test_main_end_of_input(monkeypatch, capsys):
    code, output = run(monkeypatch, capsys, "1\n")
    assert code == 1
    assert "Recursos do simulador liberados." not in output