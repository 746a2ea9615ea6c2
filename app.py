from config.config import Config
from src.personnel_system.personnel_system.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=Config.HOST, port=Config.PORT, debug=app.config["DEBUG"])
