"""
LUIS 客户端的抽象接口定义。

此模块定义了 LUIS Programmatic API 客户端的全部操作，具体实现为 LuisProgClient。
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Entity, Example, Intent, LuisApp, Publish, Training, TrainingDetails, Utterance


class ILuisProgClient(ABC):
    """
    LUIS Programmatic API 客户端接口。

    列表与按ID查询在服务返回 HTTP 400 时返回 None（视为不存在），
    其余操作对任何非成功状态都会抛出异常。
    """

    # 应用程序

    @abstractmethod
    async def get_all_apps(self) -> Optional[List[LuisApp]]:
        """
        列出所有用户应用程序

        Returns:
            应用程序列表；HTTP 400 时返回 None
        """
        ...

    @abstractmethod
    async def get_app_by_id(self, app_id: str) -> Optional[LuisApp]:
        """
        根据应用程序ID获取应用程序信息

        Args:
            app_id: 应用程序ID
        """
        ...

    @abstractmethod
    async def get_app_by_name(self, name: str) -> Optional[LuisApp]:
        """
        根据应用程序名称获取应用程序信息（名称精确匹配，区分大小写）

        Args:
            name: 名称
        """
        ...

    @abstractmethod
    async def add_app(
        self,
        name: str,
        description: Optional[str],
        culture: str,
        usage_scenario: Optional[str],
        domain: Optional[str],
        initial_version_id: Optional[str]
    ) -> str:
        """
        创建一个新的LUIS应用程序并返回id

        Args:
            name: 名称
            description: 描述
            culture: 语言，例如 "en-us"
            usage_scenario: 使用场景
            domain: 域
            initial_version_id: 初始版本ID

        Returns:
            新应用程序的ID
        """
        ...

    @abstractmethod
    async def rename_app(self, app_id: str, name: str, description: Optional[str] = None) -> None:
        """
        更改LUIS应用程序的名称和描述

        Args:
            app_id: 应用程序ID
            name: 新的名称
            description: 新的描述
        """
        ...

    @abstractmethod
    async def delete_app(self, app_id: str) -> None:
        """删除应用程序"""
        ...

    # 意图

    @abstractmethod
    async def get_all_intents(self, app_id: str, app_version_id: str) -> Optional[List[Intent]]:
        """
        获取应用程序版本中的全部意图

        Args:
            app_id: 应用程序ID
            app_version_id: 应用程序版本
        """
        ...

    @abstractmethod
    async def get_intent_by_id(self, intent_id: str, app_id: str, app_version_id: str) -> Optional[Intent]:
        """根据ID获取意图"""
        ...

    @abstractmethod
    async def get_intent_by_name(self, name: str, app_id: str, app_version_id: str) -> Optional[Intent]:
        """根据名称获取意图"""
        ...

    @abstractmethod
    async def add_intent(self, name: str, app_id: str, app_version_id: str) -> str:
        """创建一个新的意图并返回id"""
        ...

    @abstractmethod
    async def rename_intent(self, intent_id: str, name: str, app_id: str, app_version_id: str) -> None:
        """更改意图的名称"""
        ...

    @abstractmethod
    async def delete_intent(self, intent_id: str, app_id: str, app_version_id: str) -> None:
        """从应用程序版本中删除意图"""
        ...

    # 实体

    @abstractmethod
    async def get_all_entities(self, app_id: str, app_version_id: str) -> Optional[List[Entity]]:
        """获取应用程序版本中的全部实体"""
        ...

    @abstractmethod
    async def get_entity_by_id(self, entity_id: str, app_id: str, app_version_id: str) -> Optional[Entity]:
        """根据ID获取实体"""
        ...

    @abstractmethod
    async def get_entity_by_name(self, name: str, app_id: str, app_version_id: str) -> Optional[Entity]:
        """根据名称获取实体"""
        ...

    @abstractmethod
    async def add_entity(self, name: str, app_id: str, app_version_id: str) -> str:
        """创建一个新的实体并返回id"""
        ...

    @abstractmethod
    async def rename_entity(self, entity_id: str, name: str, app_id: str, app_version_id: str) -> None:
        """更改实体的名称"""
        ...

    @abstractmethod
    async def delete_entity(self, entity_id: str, app_id: str, app_version_id: str) -> None:
        """从应用程序版本中删除实体"""
        ...

    # 例子

    @abstractmethod
    async def add_example(self, app_id: str, app_version_id: str, example: Example) -> Utterance:
        """
        在应用程序版本中添加一个标记的示例

        Args:
            app_id: 应用程序ID
            app_version_id: 应用程序版本
            example: 包含示例标签的对象

        Returns:
            话语的确认对象
        """
        ...

    # 训练

    @abstractmethod
    async def train(self, app_id: str, app_version_id: str) -> TrainingDetails:
        """发送指定应用程序版本的训练请求"""
        ...

    @abstractmethod
    async def get_training_status_list(self, app_id: str, app_version_id: str) -> List[Training]:
        """
        获取应用程序版本所有模型（意图和实体）的训练状态

        与列表操作不同，任何非成功状态（包括 HTTP 400）都会抛出异常。
        """
        ...

    # 发布

    @abstractmethod
    async def publish(self, app_id: str, app_version_id: str, is_staging: bool, region: str) -> Publish:
        """
        发布应用程序的特定版本

        Args:
            app_id: 应用程序ID
            app_version_id: 应用程序版本
            is_staging: 是否发布到暂存槽
            region: 发布区域，必须与应用程序的创建区域一致
        """
        ...
