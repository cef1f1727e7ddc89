"""
configstore：可配置属性存储

- Configurable：带身份与默认值的字符串属性集合
- 列表属性以带转义的逗号分隔字符串保存
- ConfigurationManager：按 uuid 保存/恢复属性表
"""

from configstore.domain.configurable import (
    Configurable,
    DefaultsProvider,
    MappingDefaultsProvider,
)
from configstore.domain.exceptions import (
    ConfigStoreError,
    ConfigurationError,
    UnsupportedOperationError,
)
from configstore.domain.list_codec import decode_string_list, encode_string_list
from configstore.shared.logger import set_global_log_level
from configstore.infrastructure.config import (
    ConfigurationManager,
    InMemoryConfigurationManager,
    YamlConfigurationManager,
)

__version__ = "0.1.0"

__all__ = [
    "Configurable",
    "DefaultsProvider",
    "MappingDefaultsProvider",
    "ConfigStoreError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "encode_string_list",
    "decode_string_list",
    "ConfigurationManager",
    "InMemoryConfigurationManager",
    "YamlConfigurationManager",
    "set_global_log_level",
]
