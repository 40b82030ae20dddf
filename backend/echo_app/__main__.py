from echo_app.main import run

run()
