from .gaussian_work import GaussianWorkModel

weakly_dissipative = GaussianWorkModel(delta_g=1.5, dissipation=0.5, name="weakly_dissipative")
strongly_dissipative = GaussianWorkModel(delta_g=1.5, dissipation=5.0, name="strongly_dissipative")

__all__ = ["GaussianWorkModel", "weakly_dissipative", "strongly_dissipative"]
