from tourbook.main import run

run()
