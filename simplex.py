#
# N-D simplex noise with octave and combined generators.
#
# Based on example code by Stefan Gustavson (stegu@itn.liu.se).
# Better rank ordering method by Stefan Gustavson in 2012.
#
# This code was placed in the public domain by its original author,
# Stefan Gustavson. You may use it as you see fit, but
# attribution is appreciated.
#
import numpy
import itertools


# returns floor of floating point array by coercing to integer
def fastfloor(x):
    return numpy.array(numpy.floor(x), dtype = numpy.int64)


def _as_points(*coords):
    '''
    stack scalar or array coordinates into an (M, N) array of points,
    returning the points and the shape to restore on the result
    '''
    arrays = numpy.broadcast_arrays(*[numpy.asarray(c, dtype=float) for c in coords])
    shape = arrays[0].shape
    Z = numpy.stack([a.reshape(-1) for a in arrays], axis=-1)
    return Z, shape


def _restore(values, shape):
    if shape == ():
        return float(values[0])
    return values.reshape(shape)


#  # N-D simplex noise, better simplex rank ordering method 2012-03-09
class SimplexNoise:
    def __init__(self, seed=None):
        if seed is not None:
            state = numpy.random.RandomState(seed % 2**32)
            p = state.randint(256, size=256)
        else:
            p = numpy.arange(256)
        # To remove the need for index wrapping, double the permutation table length
        perm0 = numpy.arange(512, dtype='i2')
        self.perm0 = p[perm0 & 255]

    def noise(self, Z):
        # Skew the (x,y,z,w) space to determine which cell of simplices we're in
        N = Z.shape[-1] #number of dimensions
        N1 = N+1 # number of simplices
        Fn = 1.0*(N1**0.5 - 1)/N
        Gn = 1.0*(N1 - N1**0.5)/N/N1

        #skew the Z data and store in z0
        s = Z.sum(-1) * Fn # Factor for skewing
        cell = fastfloor(Z+s[:,numpy.newaxis])
        t = (cell.sum(-1) * Gn) # Factor for unskewing
        Z0 = cell - t[:,numpy.newaxis]
        z0 = Z - Z0
        # Wrap lattice coordinates to permutation size for hashing only
        i = numpy.mod(cell, 256)

        # Use magnitude ordering to determine the simplices that the point z0 is located in
        rank = numpy.zeros(Z.shape)
        for l,k in itertools.combinations(range(N),2):
            rank[:,k] += z0[:,k]>=z0[:,l]
            rank[:,l] += z0[:,k]<z0[:,l]

        # ind will contain the skewed indices of the N+1 simplices
        b = numpy.arange(N+1)[:,numpy.newaxis,numpy.newaxis]
        ind = rank>= N - b
        # zk contains the skewed locations of the N+1 simplices
        zk = z0 - ind + 1.0 * b * Gn

        indi = (ind) % 255 + i
        # the gradients are randomly assigned to each simplex
        grad = ((0,-1,1),)*N
        grad = numpy.array(list(itertools.product(*grad))[1:])
        grad = grad[numpy.abs(grad).sum(-1)>=N-1]

        gik = 0
        for x in range(N-1,-1,-1):
            gik = self.perm0[indi[:,:,x] + gik]
        gik = gik%(grad.shape[0])
        # Calculate the contribution from the simplices
        tk = 0.5 - (zk*zk).sum(-1)
        tp = tk>=0
        tk = tp * tk * tk
        nk = tp * tk * tk * (grad[gik]*zk).sum(-1)

        # Sum up and scale the result to cover the range [-1,1]
        return nk.sum(0) * (2**6 )


class OctaveNoise(object):
    '''
    Sum of `octaves` independent simplex layers. Each layer multiplies the
    sampling frequency by `frequency` and its weight by `amplitude`, so
    (0.5, 2.0) gives broad features dominating fine detail.
    '''
    def __init__(self, seed, octaves):
        state = numpy.random.RandomState(seed % 2**32)
        self.layers = [SimplexNoise(seed=int(s)) for s in state.randint(2**31, size=octaves)]

    def noise(self, Z, frequency, amplitude):
        result = numpy.zeros(Z.shape[0])
        freq = 1.0
        amp = 1.0
        for layer in self.layers:
            result += layer.noise(Z*freq) * amp
            freq *= frequency
            amp *= amplitude
        return result


class NoiseSource(object):
    '''
    Deterministic coherent noise for one world field.

    noise3(x, z, frequency, amplitude) is plain octave noise.
    noise2(x, z) is combined noise: one octave field sampled at an x
    displaced by a second octave field, which gives warped, less
    regular relief than either field alone.

    Both accept scalars or numpy arrays of matching shape.
    '''
    FREQUENCY = 0.5
    AMPLITUDE = 2.0

    def __init__(self, seed, octaves=8):
        self.seed = seed
        self.octaves = octaves
        self.primary = OctaveNoise(seed, octaves)
        self.warp = OctaveNoise(seed + 1, octaves)

    def noise3(self, x, z, frequency, amplitude):
        Z, shape = _as_points(x, z)
        return _restore(self.primary.noise(Z, frequency, amplitude), shape)

    def noise2(self, x, z):
        Z, shape = _as_points(x, z)
        offset = self.warp.noise(Z, self.FREQUENCY, self.AMPLITUDE)
        W = Z.copy()
        W[:,0] += offset
        return _restore(self.primary.noise(W, self.FREQUENCY, self.AMPLITUDE), shape)
