from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from container + optionally from files
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.docker"),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="gst_invoice_engine", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Seller (place the goods are shipped from)
    SELLER_BUSINESS_NAME: str = Field(default="LeLeKart", validation_alias=AliasChoices("SELLER_BUSINESS_NAME", "seller_business_name"))
    SELLER_ADDRESS: str = Field(
        default="123 Commerce Street, Mumbai, Maharashtra, 400001",
        validation_alias=AliasChoices("SELLER_ADDRESS", "seller_address"),
    )
    SELLER_GSTIN: str = Field(default="27AABCU9603R1ZX", validation_alias=AliasChoices("SELLER_GSTIN", "seller_gstin"))
    SELLER_PINCODE: str = Field(default="400001", validation_alias=AliasChoices("SELLER_PINCODE", "seller_pincode"))
    SELLER_STATE: str = Field(default="Maharashtra", validation_alias=AliasChoices("SELLER_STATE", "seller_state"))

    # GST defaults for records that carry no rate
    DEFAULT_DELIVERY_GST_RATE: float = Field(
        default=5.0,
        validation_alias=AliasChoices("DEFAULT_DELIVERY_GST_RATE", "default_delivery_gst_rate"),
    )
    DEFAULT_PRODUCT_GST_RATE: float = Field(
        default=18.0,
        validation_alias=AliasChoices("DEFAULT_PRODUCT_GST_RATE", "default_product_gst_rate"),
    )


settings = Settings()
