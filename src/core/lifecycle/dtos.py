"""
Data Transfer Objects (DTOs) genéricos do Ciclo de Vida.

- PageRequest: parâmetros de paginação (página 0-indexed)
- Page: página de resultados com metadados, derivada e nunca persistida
- Parameters: variáveis de caminho e de query que acompanham cada operação
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union

from src.core.shared.interfaces import Convertible

A = TypeVar("A")
B = TypeVar("B")

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class PageRequest:
    """
    Parâmetros de paginação.

    Attributes:
        page_index: Índice da página (começa em 0)
        page_size: Itens por página (0 produz página vazia válida)
    """

    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page_index < 0:
            raise ValueError(f"page_index não pode ser negativo: {self.page_index}")
        if self.page_size < 0:
            raise ValueError(f"page_size não pode ser negativo: {self.page_size}")

    @property
    def offset(self) -> int:
        """Calcula offset para query."""
        return self.page_index * self.page_size

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: Optional[int] = None,
    ) -> "PageRequest":
        """
        Constrói a partir de parâmetros de transporte (ex: query string).

        Lê "page" e "per_page"; valores ausentes usam os defaults e
        per_page é limitado a max_page_size quando informado.

        Raises:
            ValueError: Se valores não forem inteiros ou forem negativos
        """
        page_index = int(params.get("page", 0))
        page_size = int(params.get("per_page", default_page_size))
        if max_page_size is not None:
            page_size = min(page_size, max_page_size)
        return cls(page_index, page_size)


@dataclass(frozen=True)
class Parameters:
    """
    Contexto de uma chamada: variáveis de caminho e parâmetros de query.

    O orquestrador não interpreta estes valores; apenas os repassa aos
    hooks de repositório, que tipos especializados podem sobrescrever
    (ex: restringir a busca ao dono indicado no caminho).

    Attributes:
        path: Nome → valor das variáveis de caminho
        query: Nome → valores do parâmetro de query (podem repetir)

    Example:
        params = Parameters.of(path={"owner": "42"}, query={"tag": ["a", "b"]})
        params.path_variable("owner", int)  # 42
        params.query_parameters("tag")      # ["a", "b"]
    """

    path: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def of(
        cls,
        path: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Union[str, Iterable[str]]]] = None,
    ) -> "Parameters":
        """Normaliza a query: valor único vira tupla de um elemento."""
        normalized = {}
        for name, values in (query or {}).items():
            if isinstance(values, str):
                values = (values,)
            normalized[name] = tuple(values)
        return cls(path=dict(path or {}), query=normalized)

    def path_variable(self, name: str, converter: Optional[Callable[[str], A]] = None) -> Optional[A]:
        """
        Variável de caminho, opcionalmente convertida.

        Raises:
            ValueError: Se a conversão falhar
        """
        return _converted(self.path.get(name), name, "path variable", converter)

    def query_parameters(self, name: str) -> List[str]:
        """Todos os valores do parâmetro de query (lista vazia se ausente)."""
        return list(self.query.get(name, ()))

    def query_parameter(self, name: str, converter: Optional[Callable[[str], A]] = None) -> Optional[A]:
        """
        Primeiro valor do parâmetro de query, opcionalmente convertido.

        Raises:
            ValueError: Se a conversão falhar
        """
        values = self.query.get(name, ())
        return _converted(values[0] if values else None, name, "query parameter", converter)


def _converted(value, name, kind, converter):
    if value is None or converter is None:
        return value
    try:
        return converter(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot get '{name}' {kind}, conversion failed") from e


def total_pages_for(total_count: int, page_size: int) -> int:
    """ceil(total_count / page_size); 0 quando page_size é 0."""
    if page_size <= 0:
        return 0
    return (total_count + page_size - 1) // page_size


@dataclass(frozen=True)
class Page(Generic[A]):
    """
    Página de resultados com metadados de paginação.

    Attributes:
        items: Itens da página atual, em ordem
        page_index: Página atual (0-indexed)
        page_size: Itens por página
        total_pages: Total de páginas disponíveis

    Example:
        page = Page(items=("a", "ab", "abc"), page_index=0, page_size=3, total_pages=1)
        page.map(len).items  # (1, 2, 3)
    """

    items: Tuple[A, ...]
    page_index: int
    page_size: int
    total_pages: int

    def __post_init__(self):
        # Aceita qualquer iterável mas guarda tupla (imutável)
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(
        cls,
        items: Iterable[A],
        page_index: int,
        page_size: int,
        total_count: int,
    ) -> "Page[A]":
        """Monta página calculando total_pages a partir do total de itens."""
        return cls(
            items=tuple(items),
            page_index=page_index,
            page_size=page_size,
            total_pages=total_pages_for(total_count, page_size),
        )

    @classmethod
    def empty(cls, page_index: int, page_size: int, total_pages: int = 0) -> "Page[A]":
        """Página sem itens com os metadados dados."""
        return cls(items=(), page_index=page_index, page_size=page_size, total_pages=total_pages)

    def map(self, f: Convertible[A, B]) -> "Page[B]":
        """
        Converte cada item, preservando ordem, quantidade e metadados.

        A página original não é alterada.
        """
        return Page(
            items=tuple(f(item) for item in self.items),
            page_index=self.page_index,
            page_size=self.page_size,
            total_pages=self.total_pages,
        )

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_next(self) -> bool:
        """Verifica se há próxima página."""
        return self.page_index + 1 < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Verifica se há página anterior."""
        return self.page_index > 0

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dict."""
        return {
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.items
            ],
            "page": self.page_index,
            "per_page": self.page_size,
            "total_pages": self.total_pages,
        }
