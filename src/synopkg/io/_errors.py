"""設定解決で発生するエラー。

いずれもリゾルバー内部で吸収され、呼び出し元には伝播しない。
"""


class ConfigResolutionError(Exception):
    """設定解決エラーの基底クラス。"""


class SearcherConstructionError(ConfigResolutionError):
    """ConfigSearcher を構築できない。

    モジュール名が不正、または探索場所が空の場合。
    """


class ConfigSearchError(ConfigResolutionError):
    """設定ファイルの探索・読み込みに失敗した。

    I/O エラー、構文エラー、未対応の拡張子等。
    """


class ManifestReadError(ConfigResolutionError):
    """package.json を読み込めない。

    ファイル不在、読み取り権限なし、JSON 構文エラー、トップレベルがオブジェクトでない場合。
    """


class FieldAbsentError(ConfigResolutionError):
    """package.json に config.<module> フィールドがない、または空である。"""
