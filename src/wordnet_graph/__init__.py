__version__ = "0.1.0"

from wordnet_graph.exceptions import (
    WordnetGraphError as WordnetGraphError,
    FormatError as FormatError,
    IntegrityError as IntegrityError,
    DataSourceError as DataSourceError,
    QueryError as QueryError,
    ConfigError as ConfigError,
)

from wordnet_graph.relations import (
    Relation as Relation,
    POINTER_SYMBOLS as POINTER_SYMBOLS,
)

from wordnet_graph.models import (
    PartOfSpeech as PartOfSpeech,
    AdjPosition as AdjPosition,
    SynsetKey as SynsetKey,
    Synset as Synset,
    Word as Word,
    Frame as Frame,
    SemanticRelation as SemanticRelation,
    SyntacticRelation as SyntacticRelation,
    ParsedEntry as ParsedEntry,
)

from wordnet_graph.parser import (
    parse_line as parse_line,
    parse_stream as parse_stream,
)

from wordnet_graph.builder import GraphBuilder as GraphBuilder

from wordnet_graph.index import normalize as normalize

from wordnet_graph.handle import (
    Wordnet as Wordnet,
    Lookup as Lookup,
)

from wordnet_graph.config import (
    LoaderConfig as LoaderConfig,
    load_config as load_config,
)

from wordnet_graph.loader import (
    load as load,
    load_streams as load_streams,
    discover_data_files as discover_data_files,
)

__all__ = [
    # Exceptions
    "WordnetGraphError",
    "FormatError",
    "IntegrityError",
    "DataSourceError",
    "QueryError",
    "ConfigError",
    # Enums and constants
    "Relation",
    "POINTER_SYMBOLS",
    "PartOfSpeech",
    "AdjPosition",
    # Data classes
    "SynsetKey",
    "Synset",
    "Word",
    "Frame",
    "SemanticRelation",
    "SyntacticRelation",
    "ParsedEntry",
    # Pipeline
    "parse_line",
    "parse_stream",
    "GraphBuilder",
    "normalize",
    # Handle
    "Wordnet",
    "Lookup",
    # Loading
    "LoaderConfig",
    "load_config",
    "load",
    "load_streams",
    "discover_data_files",
]
