import argparse
import sys
import time
import numpy as np
from somlvq.classifier import SomLvq


def main(argv = None):
    parser = argparse.ArgumentParser()
    # positional arguments
    parser.add_argument(
        "parameters",
        type = str,
        help = "Parameter file - gridSize, learningRate, maxIterations, dataDimension, standardDeviation, trainFile, testFile"
    )
    # outputs
    parser.add_argument(
        "-e", "--error",
        type = str,
        default = "errors.txt",
        help = "Error file - epoch, train error, test error (Default = errors.txt)"
    )
    parser.add_argument(
        "-c", "--clustering",
        type = str,
        default = "clustering.txt",
        help = "Label map of SOM nodes (Default = clustering.txt)"
    )
    # SOM training
    parser.add_argument(
        "-s", "--seed",
        type = int,
        help = "Random seed (Default = system entropy)"
    )
    parser.add_argument(
        "--standardize",
        help = "Standardize both data sets by the training set",
        action = "store_true"
    )
    parser.add_argument(
        "--keep-duplicates",
        help = "Keep every row of a repeated label instead of the last one",
        action = "store_true"
    )
    parser.add_argument(
        "-q", "--quiet",
        help = "Hide epoch progress bar",
        action = "store_true"
    )
    # Plot
    parser.add_argument(
        "-1", "--plot_error",
        help = "Plot train and test error for each epoch",
        action = "store_true"
    )
    parser.add_argument(
        "-2", "--heat",
        help = "Plot label map of SOM",
        action = "store_true"
    )
    # assign arguments
    args = parser.parse_args(argv)
    start_time = time.time()
    try:
        som_lvq = SomLvq.from_parameters(
            args.parameters, standard = args.standardize, collapse = not args.keep_duplicates,
            seed = args.seed, verbose = not args.quiet
        )
        som_lvq.learn()
        som_lvq.write_errors(args.error)
        som_lvq.write_labels(args.clustering)
    except (ValueError, OSError) as e:
        print("Error: %s" % e)
        return 1
    som_grid = som_lvq.som_grid
    print("")
    print("process for %.2f seconds================================================\n" %(time.time() - start_time))
    # files
    print("Files-------------------------------------")
    print("Training data: ", som_lvq.path_train)
    print("Test data: ", som_lvq.path_test)
    print("Error per epoch: ", args.error)
    print("Label map: ", args.clustering)
    # print parameter
    print("SOM parameters----------------------------")
    if som_lvq.standard:
        print("Standardized!")
    print("Initial learning rate: ", som_grid.initial_learn)
    print("Initial standard deviation: ", som_grid.initial_r)
    print("SOM grid: ", som_grid.grid_size)
    print("Data dimension: ", som_grid.data_dim)
    print("Epoch number: ", som_grid.epoch_num)
    print("Training set size: ", len(som_lvq.som_tr))
    print("Test set size: ", len(som_lvq.som_te))
    print("------------------------------------------")
    if som_grid.epoch_num > 0:
        print("Last train error: %.5f" % som_grid.train_error[-1])
        print("Last test error: %.5f" % som_grid.test_error[-1])
    print("Test accuracy: %.3f" % som_grid.score(som_lvq.som_te))
    print("==========================================")
    print(som_lvq.report())
    # plot
    if args.plot_error or args.heat:
        plot_start = time.time()
        if args.plot_error:
            som_lvq.plot_error()
        if args.heat:
            som_lvq.plot_labels()
        print("Plotting time: %.2f seconds" % (time.time() - plot_start))
    return 0


if __name__ == '__main__':
    np.set_printoptions(precision = 3)
    sys.exit(main())
