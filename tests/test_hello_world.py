from src.core.programs import hello_world


def test_prints_exactly_one_line(capsys):
    hello_world.run()

    captured = capsys.readouterr()
    assert captured.out == "Hello, world!\n"
    assert captured.err == ""
