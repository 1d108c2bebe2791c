"""
모듈 식별 정보 파서

리소스 위치 문자열에서 모듈 이름과 버전을 추출합니다.
"""

from ..models.base import ModuleIdentity


def _path_of(locator: str) -> str:
    """쿼리 문자열과 프래그먼트를 제외한 경로 부분"""
    for separator in ("?", "#"):
        locator = locator.split(separator, 1)[0]
    return locator


def schema(locator: str) -> ModuleIdentity:
    """
    리소스 위치에서 모듈 식별 정보 추출

    마지막 '/' 뒤의 세그먼트를 첫 번째 '.' 기준으로 이름과 나머지로 나누고,
    나머지는 다시 첫 번째 '.' 기준으로 버전과 확장자로 나눕니다.

    Args:
        locator: 스크립트 리소스의 상대 또는 절대 위치

    Returns:
        ModuleIdentity: 이름, 버전, 확장자

    Examples:
        >>> schema("/modules/bustMe.js").name
        'bustMe'
        >>> schema("/x/missing.v2.js").version
        'v2'
    """
    segment = _path_of(locator).split("/")[-1]

    if "." not in segment:
        return ModuleIdentity(name=segment)

    name, remainder = segment.split(".", 1)
    version, _, extension = remainder.partition(".")
    return ModuleIdentity(name=name, version=version, extension=extension)
