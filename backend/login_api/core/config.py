from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import MongoDsn
class Settings(BaseSettings):
    mongo_uri: MongoDsn = "mongodb://localhost:27017/login_api"
    users_collection: str = "users"
    log_level: str = "INFO"
    log_json: bool = False
    # attach an EmailValidator to routers built by main.build_login_router;
    # special-use domains (user@host.test, x@localhost) then get a 400
    # InvalidParamError and never reach the auth use case
    check_email_syntax: bool = True
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
@lru_cache
def get_settings() -> Settings: return Settings()
