# src/depinsight/models/resolution.py
"""
外部依賴解析器產出的「已解析依賴視圖」資料模型。

此模組中的物件皆為唯讀：本專案只消費解析結果，不負責依賴解析本身。
"""

# 1. 標準庫導入
import re
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

_DEPENDENCY_PATTERN = re.compile(r"^\s*(?P<name>[^\s(]+)\s*(?:\((?P<requirement>[^)]*)\))?\s*$")


def root_name_of(name: str) -> str:
    """回傳子組件名稱 (例如 `A/Core`) 所屬的頂層套件名稱。"""
    return name.split("/", 1)[0]


@dataclass(frozen=True)
class Dependency:
    """一個宣告的依賴引用：名稱加上可選的版本需求。"""

    name: str
    requirement: str | None = None

    @property
    def root_name(self) -> str:
        return root_name_of(self.name)

    @classmethod
    def parse(cls, text: str) -> "Dependency":
        """
        解析 lockfile 風格的依賴字串，例如 `"AFNetworking/Core (~> 2.0)"`。

        Raises:
            ValueError: 字串無法解析時。
        """
        match = _DEPENDENCY_PATTERN.match(text)
        if not match:
            raise ValueError(f"無法解析的依賴字串: {text!r}")
        requirement = match.group("requirement")
        return cls(match.group("name"), requirement.strip() if requirement else None)

    def __str__(self) -> str:
        return f"{self.name} ({self.requirement})" if self.requirement else self.name


@dataclass(frozen=True)
class Source:
    """Spec 的來源描述：本地來源，或一個具名的遠端來源。"""

    name: str | None = None

    @property
    def is_local(self) -> bool:
        return self.name is None

    @classmethod
    def local(cls) -> "Source":
        return cls(None)

    @classmethod
    def remote(cls, name: str) -> "Source":
        return cls(name)


@dataclass(frozen=True)
class Spec:
    """
    一個已解析的套件 (或子組件) 描述。

    `source` 為 None 表示來源不明確，建構器會嘗試從同目標中的兄弟 Spec 推斷。
    """

    name: str
    version: str | None = None
    root_name: str = ""
    source: Source | None = None

    def __post_init__(self):
        if not self.root_name:
            object.__setattr__(self, "root_name", root_name_of(self.name))

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.version})" if self.version else self.name

    def __str__(self) -> str:
        return self.display_name


@dataclass(eq=False)
class Target:
    """
    消費端專案中的一個建置目標。

    以物件身分比較 (identity)，因為 parent 會形成樹狀引用。
    """

    name: str
    parent: "Target | None" = None
    exclusive: bool = True
    dependencies: tuple[Dependency, ...] = ()
    root: bool = True

    def __repr__(self) -> str:
        parent_name = self.parent.name if self.parent else None
        return f"Target(name={self.name!r}, parent={parent_name!r}, root={self.root})"


@dataclass
class ResolvedDependencyView:
    """Target → (Spec → 依賴序列) 的有序映射。"""

    specs_by_target: dict[Target, dict[Spec, tuple[Dependency, ...]]] = field(default_factory=dict)

    @property
    def targets(self) -> list[Target]:
        return list(self.specs_by_target.keys())

    def items(self):
        return self.specs_by_target.items()

    def all_specs(self) -> dict[Spec, tuple[Dependency, ...]]:
        """跨所有目標合併 Spec，先出現者優先。"""
        merged: dict[Spec, tuple[Dependency, ...]] = {}
        for specs in self.specs_by_target.values():
            for spec, dependencies in specs.items():
                merged.setdefault(spec, dependencies)
        return merged

    def summary(self) -> dict[str, Any]:
        return {
            "targets": len(self.specs_by_target),
            "specs": len(self.all_specs()),
        }
