from dataclasses import dataclass

# Reference values from Madgwick's original implementation
DEFAULT_BETA = 0.1            # rad/s, 0.04-0.2 typical
DEFAULT_SAMPLE_FREQ = 512.0   # Hz


@dataclass
class MadgwickConfig:
    """
    Filter parameters applied in one call.
    - beta: algorithm gain, trust in accel/mag correction vs gyro integration
    - sample_freq: rate (Hz) the caller feeds samples at, dt = 1/sample_freq
    """
    beta: float = DEFAULT_BETA
    sample_freq: float = DEFAULT_SAMPLE_FREQ

    @classmethod
    def from_params(cls, params):
        """
        Build a config from a parameter mapping ("madgwick_beta", "sample_freq").
        Missing keys fall back to the defaults.
        Raises ValueError if a value is not numeric.
        """
        try:
            beta = float(params.get("madgwick_beta", DEFAULT_BETA))
            sample_freq = float(params.get("sample_freq", DEFAULT_SAMPLE_FREQ))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Madgwick parameter: {e}") from e
        return cls(beta=beta, sample_freq=sample_freq)
