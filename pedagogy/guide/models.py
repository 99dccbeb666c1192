from dataclasses import dataclass


@dataclass(frozen=True)
class GuideSection:
    title: str
    content: tuple[str, ...]


@dataclass(frozen=True)
class TechnicalRequirements:
    browsers: tuple[str, ...]
    accessibility: tuple[str, ...]
    features: tuple[str, ...]


@dataclass(frozen=True)
class UsageGuide:
    title: str
    sections: tuple[GuideSection, ...]
    technical_requirements: TechnicalRequirements
