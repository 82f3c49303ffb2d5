"""Codec Quality Bounded Context.

Responsible for E-model coefficient lookup for the Opus codec:
- Value Objects: CoefficientEntry, QualityMetric, ConfigurationDescriptor
- Enumerations: BandwidthClass, ControlMode, LossPattern
- Ports: CoefficientRepository
- Services: CoefficientQueryService
"""
