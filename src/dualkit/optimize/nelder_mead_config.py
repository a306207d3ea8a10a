"""Configuration for the Nelder-Mead simplex optimizer.

The coefficients control the geometry of each simplex move; the tolerance and
iteration cap control when :func:`~dualkit.optimize.nelder_mead.minimize`
stops.
"""

from __future__ import annotations


class NelderMeadConfig:
    """Options for the Nelder-Mead downhill simplex method."""

    def __init__(
        self,
        alpha: float = 1.0,
        gamma: float = 2.0,
        rho: float = 0.5,
        sigma: float = 0.5,
        epsilon: float = 1e-12,
        max_iter: int = 10_000,
    ):
        """Initialize configuration.

        Args:
            alpha:
                Reflection coefficient. The worst vertex is mirrored through
                the centroid of the others as ``x0 + alpha * (x0 - x_worst)``.

            gamma:
                Expansion coefficient. When the reflected point is a new best,
                the step is stretched to ``x0 + gamma * (x_r - x0)``.

            rho:
                Contraction coefficient, used for both the outside
                (towards the reflected point) and the inside (towards the
                worst point) contraction.

            sigma:
                Shrink coefficient. If no move improves on the worst vertex,
                every vertex but the best is pulled to
                ``x_best + sigma * (x_i - x_best)``.

            epsilon:
                Convergence tolerance on the standard deviation of the vertex
                values.

            max_iter:
                Maximum number of iterations. This is the only bound on the
                run time; the optimizer does not detect cycling.
        """
        self.alpha = float(alpha)
        self.gamma = float(gamma)
        self.rho = float(rho)
        self.sigma = float(sigma)
        self.epsilon = float(epsilon)
        self.max_iter = int(max_iter)
