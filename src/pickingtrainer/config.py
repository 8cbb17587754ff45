"""環境変数・.env からの設定読み込み"""

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    TRAINER_DB_PATH: str = os.getenv("TRAINER_DB_PATH", "picking_trainer.db")

    TRAINER_SLIP_COUNT: int = int(os.getenv("TRAINER_SLIP_COUNT", "3"))
    TRAINER_ITEMS_PER_SLIP: int = int(os.getenv("TRAINER_ITEMS_PER_SLIP", "5"))
    TRAINER_TASK_COUNT: int = int(os.getenv("TRAINER_TASK_COUNT", "10"))
    TRAINER_IMAGE_DIR: str = os.getenv("TRAINER_IMAGE_DIR", "slips")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR


settings = Settings()
