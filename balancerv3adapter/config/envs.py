from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    # A chain is served only when both its subgraph and RPC urls are set.
    SUBGRAPH_URL_SONIC: str = ''
    RPC_URL_SONIC: str = ''
    SUBGRAPH_URL_ETHEREUM: str = ''
    RPC_URL_ETHEREUM: str = ''
    SUBGRAPH_URL_ARBITRUM: str = ''
    RPC_URL_ARBITRUM: str = ''
    SUBGRAPH_URL_OPTIMISM: str = ''
    RPC_URL_OPTIMISM: str = ''
    SUBGRAPH_URL_BASE: str = ''
    RPC_URL_BASE: str = ''
    SUBGRAPH_URL_AVALANCHE: str = ''
    RPC_URL_AVALANCHE: str = ''
    SUBGRAPH_URL_GNOSIS: str = ''
    RPC_URL_GNOSIS: str = ''
    SUBGRAPH_URL_HYPEREVM: str = ''
    RPC_URL_HYPEREVM: str = ''

    BALANCER_API_URL: str = 'https://api-v3.balancer.fi'
    TOKEN_MAPPING_CACHE_SECONDS: int = 300
    SUBGRAPH_PAGE_SIZE: int = 1000
    HTTP_TIMEOUT: int = 30
    HTTP_RETRIES: int = 3

    HOST: str = '0.0.0.0'
    PORT: int = 3000

    LOGGING_LEVEL: str = 'INFO'
    LOGSTASH_HOST: str = 'logstash-logstash.logging.svc.cluster.local'
    LOGSTASH_PORT: int = 5959
    LOGSTASH_LOGGING_LEVEL: str = 'INFO'
    LOG_HANDLERS: list[str] = ['console']
    SERVICE_NAME: str = 'balancer-v3-dex-screener-adapter'


envs = EnvsConfig()
